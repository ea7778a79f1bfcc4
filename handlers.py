from theme_loader import Theme, load_theme
from timetable_store import TimetableData


class RequestHandlers:
    def __init__(self, app_state):
        self.state = app_state

    def get_theme(self) -> Theme:
        return load_theme(self.state.theme_path)

    def get_schedule(self) -> TimetableData:
        return TimetableData.load(self.state.data_path)

    def save_cell(self, row: int, col: int, value: str) -> None:
        TimetableData.save(self.state.data_path, row, col, value)
