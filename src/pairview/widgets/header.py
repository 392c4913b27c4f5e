from textual.widgets import Header as TextualHeader

APP_NAME = "Pairview"


class Header(TextualHeader):
    """Application header showing the current page name."""

    DEFAULT_CSS = """
    Header {
        dock: top;
        background: $panel-darken-2;
        padding: 0 1;
        text-style: bold;
        content-align: center middle;
        height: 1;
    }
    """

    def __init__(self, page_name: str = "", show_clock: bool = False):
        super().__init__(show_clock=show_clock)
        self.page_name = page_name

    def on_mount(self) -> None:
        self.screen.title = f"{APP_NAME} - {self.page_name}" if self.page_name else APP_NAME
