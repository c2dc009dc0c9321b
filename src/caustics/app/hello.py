from __future__ import annotations

from PySide6.QtWidgets import QLabel, QWidget

from caustics import config
from caustics.app.application import create_app


class HelloLabel(QLabel):
    """Top-level window showing a single centred greeting."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(config.HELLO_TEXT, parent)
        self.setWindowTitle(config.HELLO_TITLE)
        self.resize(*config.HELLO_SIZE)


def run_hello() -> int:
    app = create_app()
    hello = HelloLabel()
    hello.show()
    return app.exec()
