from .config import settings, set_settings, reset_settings, setting, log_level, default_seed, cnpj_numeric_only
from .text import normalize, strip_accents, squash, to_bool, safe_int
from .chars import is_digit, is_upper_alpha, is_alnum_upper, to_upper_ascii
from .checksum import digit_value, alnum_value, extract_values, weighted_sum, check_digit, check_digit_from_sum
from .layout import strip_separators, insert_separators, to_compact
from .logs import get_logger, mask_document
from .random_source import default_rng, seed_default_rng, resolve_rng

__all__ = [
    "settings", "set_settings", "reset_settings", "setting", "log_level", "default_seed", "cnpj_numeric_only",
    "normalize", "strip_accents", "squash", "to_bool", "safe_int",
    "is_digit", "is_upper_alpha", "is_alnum_upper", "to_upper_ascii",
    "digit_value", "alnum_value", "extract_values", "weighted_sum", "check_digit", "check_digit_from_sum",
    "strip_separators", "insert_separators", "to_compact",
    "get_logger", "mask_document",
    "default_rng", "seed_default_rng", "resolve_rng",
]
