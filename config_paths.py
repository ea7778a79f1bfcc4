import os

# running from inside the desktop shell's crate dir puts assets one level up
SENTINEL_DIR = "src-tauri"
THEME_RELPATH = os.path.join("assets", "styles", "theme.conf")
DATA_RELPATH = os.path.join("data", "schedule.csv")

THEME_PATH_ENV = "TIMETABLE_THEME_PATH"
DATA_PATH_ENV = "TIMETABLE_DATA_PATH"


def current_base_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        return "."


def resolve_paths(base_dir: str) -> tuple[str, str]:
    if os.path.basename(os.path.normpath(base_dir)) == SENTINEL_DIR:
        root = os.path.join(base_dir, "..")
    else:
        root = base_dir
    return os.path.join(root, THEME_RELPATH), os.path.join(root, DATA_RELPATH)


def load_config(base_dir: str | None = None) -> dict:
    base = base_dir if base_dir is not None else current_base_dir()
    theme_path, data_path = resolve_paths(base)

    theme_override = os.environ.get(THEME_PATH_ENV)
    data_override = os.environ.get(DATA_PATH_ENV)
    return {
        "THEME_PATH": theme_override if theme_override else theme_path,
        "DATA_PATH": data_override if data_override else data_path,
    }
