"""pyswr public API."""
from .models import (
    Band,
    BandSWRData,
    Complex,
    ParsedFile,
    QualityTier,
    Sample,
    SweepSummary,
    SWRPoint,
)
from .touchstone import DataFormat, FormatError, FrequencyUnit, ParameterType, parse_sparameter_file
from .swr import (
    MAX_SWR,
    REFLECTION_CLAMP,
    calculate_swr,
    decimate,
    summarize_sweep,
    swr_to_power_reflected,
    swr_to_power_transmitted,
    swr_to_return_loss,
)
from .bands import AMATEUR_BANDS, bands_in_range, filter_swr_by_band, get_band_swr_data, select_default_bands
from .quality import format_frequency, get_swr_quality
from .analyser import AnalysisConfig, AnalysisResult, SWRAnalyser

__all__ = [
    "Band",
    "BandSWRData",
    "Complex",
    "ParsedFile",
    "QualityTier",
    "Sample",
    "SweepSummary",
    "SWRPoint",
    "DataFormat",
    "FormatError",
    "FrequencyUnit",
    "ParameterType",
    "parse_sparameter_file",
    "MAX_SWR",
    "REFLECTION_CLAMP",
    "calculate_swr",
    "decimate",
    "summarize_sweep",
    "swr_to_power_reflected",
    "swr_to_power_transmitted",
    "swr_to_return_loss",
    "AMATEUR_BANDS",
    "bands_in_range",
    "filter_swr_by_band",
    "get_band_swr_data",
    "select_default_bands",
    "format_frequency",
    "get_swr_quality",
    "AnalysisConfig",
    "AnalysisResult",
    "SWRAnalyser",
]
