import pytest

from gridgl.application import Application, ApplicationError


class FakeWindow:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class DemoApp(Application):
    def __init__(self, window_factory):
        super().__init__("Demo", "1.0", 800, 600)
        self._factory = window_factory
        self.ran = False

    def _create_window(self):
        return self._factory()

    def run(self):
        self.ran = True


def _fail():
    raise RuntimeError("no display")


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Application("Demo", "1.0", 800, 600)


def test_init_and_close():
    window = FakeWindow()
    app = DemoApp(lambda: window)
    Application.init(app)
    assert app.window is window
    Application.close(app)
    assert window.closed
    assert app.window is None


def test_attributes_stored():
    window = FakeWindow()
    app = DemoApp(lambda: window)
    Application.init(app)
    assert (app.name, app.version, app.screen_width, app.screen_height) == ("Demo", "1.0", 800, 600)
    assert app.window is window


def test_window_failure_raises():
    with pytest.raises(ApplicationError):
        Application.init(DemoApp(_fail))


def test_missing_window_raises():
    with pytest.raises(ApplicationError):
        Application.init(DemoApp(lambda: None))


def test_context_manager_closes():
    window = FakeWindow()
    app = DemoApp(lambda: window)
    entered = Application.__enter__(app)
    assert entered is app
    assert entered.window is window
    entered.run()
    assert app.ran
    Application.__exit__(app, None, None, None)
    assert window.closed
    assert app.window is None