from .density import suggest_alpha, suggest_pt_size, ALPHA_BREAKS, PT_SIZE_BREAKS

__all__ = [
    "suggest_alpha",
    "suggest_pt_size",
    "ALPHA_BREAKS",
    "PT_SIZE_BREAKS",
]
