"""Qt front-ends (PySide6 widgets, pyqtgraph plots)."""
