from .settings import PRINTING_SETTINGS


def custom_print(message, level='DEFAULT'):
    if PRINTING_SETTINGS[level]:
        print(f"[{level}] {message}")


def format_seconds(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}us"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.3f}s"
