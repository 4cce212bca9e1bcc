import os


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def format_time(seconds: int) -> str:
    seconds = max(0, int(seconds))
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"
