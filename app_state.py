from config_paths import load_config


class AppState:
    """File locations shared by the request handlers.

    Built once at startup and treated as read-only afterwards.
    """

    def __init__(self, theme_path, data_path):
        self._theme_path = str(theme_path)
        self._data_path = str(data_path)

    @classmethod
    def from_cwd(cls, base_dir: str | None = None) -> "AppState":
        cfg = load_config(base_dir)
        return cls(cfg["THEME_PATH"], cfg["DATA_PATH"])

    @property
    def theme_path(self) -> str:
        return self._theme_path

    @property
    def data_path(self) -> str:
        return self._data_path

    def __repr__(self):
        return f"AppState(theme_path={self._theme_path!r}, data_path={self._data_path!r})"
