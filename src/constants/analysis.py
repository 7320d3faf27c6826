from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    common_threshold_high: int = 4
    common_threshold_low: int = 2
    big_data_limit: int = 700

    # Baselines for the SV/CPC scatter on the results page.
    chart_sv_target: float = 150
    chart_cpc_target: float = 2.5


ANALYSIS_CONFIG = AnalysisConfig()

MIN_BRAND_FRAGMENT_LENGTH = 3
