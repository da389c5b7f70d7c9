import pytest


@pytest.fixture(scope="session")
def qapp():
    """Return the running QCoreApplication, creating one if needed."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
