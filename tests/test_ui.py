import pygame
import pytest

from taskdesk import ui
from taskdesk.accounts import AccountStore
from taskdesk.db import open_database
from taskdesk.store import TaskStore


def _center(rect):
    return rect.x + rect.width / 2, rect.y + rect.height / 2


def _click(app, rect):
    app.handle_click(*_center(rect))


def _type(app, text):
    for char in text:
        app.handle_char(char)


@pytest.fixture
def connection():
    conn = open_database(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def app(connection):
    return ui.App(connection)


def _fill_form(app, name, secret_text):
    _click(app, ui.USERNAME_BOX)
    _type(app, name)
    _click(app, ui.PASSWORD_BOX)
    _type(app, secret_text)


def _dashboard(connection, name="alice"):
    AccountStore(connection).register(name, "password")
    app = ui.App(connection)
    app.screen = ui.Screen.LOGIN
    _fill_form(app, name, "password")
    _click(app, ui.SUBMIT_BUTTON)
    app.handle_click(0, 0)
    return app


def test_starts_on_registration(app):
    assert app.screen is ui.Screen.REGISTRATION
    assert app.popup is None


def test_register_with_empty_fields(app):
    _click(app, ui.SUBMIT_BUTTON)
    assert app.popup.message == ui.MSG_EMPTY_FIELDS
    assert app.popup.success is False
    assert app.screen is ui.Screen.REGISTRATION


def test_typing_goes_to_focused_field(app):
    _click(app, ui.USERNAME_BOX)
    _type(app, "bob")
    assert app.registration.username.text == "bob"
    assert app.registration.password.text == ""


def test_typing_ignored_without_focus(app):
    _type(app, "bob")
    assert app.registration.username.text == ""
    assert app.registration.password.text == ""


def test_non_printable_ignored(app):
    _click(app, ui.USERNAME_BOX)
    _type(app, "a\tb\n")
    assert app.registration.username.text == "ab"


def test_backspace_removes_last_char(app):
    _click(app, ui.USERNAME_BOX)
    _type(app, "abc")
    app.handle_backspace()
    assert app.registration.username.text == "ab"


def test_successful_registration_moves_to_login(app, connection):
    _fill_form(app, "bob", "secret")
    _click(app, ui.SUBMIT_BUTTON)
    assert app.screen is ui.Screen.LOGIN
    assert app.popup.message == ui.MSG_REGISTERED
    assert app.popup.color == ui.GREEN
    assert AccountStore(connection).login("bob", "secret")


def test_duplicate_registration_fails(app, connection):
    AccountStore(connection).register("bob", "password")
    _fill_form(app, "bob", "secret")
    _click(app, ui.SUBMIT_BUTTON)
    assert app.screen is ui.Screen.REGISTRATION
    assert app.popup.message == ui.MSG_REGISTER_FAILED
    assert app.popup.color == ui.RED


def test_typing_blocked_while_popup_shown(app):
    _click(app, ui.SUBMIT_BUTTON)
    _type(app, "x")
    assert app.registration.username.text == ""


def test_login_with_wrong_password(app, connection):
    AccountStore(connection).register("bob", "password")
    app.screen = ui.Screen.LOGIN
    _fill_form(app, "bob", "secret")
    _click(app, ui.SUBMIT_BUTTON)
    assert app.screen is ui.Screen.LOGIN
    assert app.popup.message == ui.MSG_LOGIN_FAILED


def test_login_moves_to_dashboard(connection):
    AccountStore(connection).register("bob", "password")
    app = ui.App(connection)
    app.screen = ui.Screen.LOGIN
    _fill_form(app, "bob", "password")
    _click(app, ui.SUBMIT_BUTTON)
    assert app.screen is ui.Screen.DASHBOARD
    assert app.username == "bob"
    assert app.popup.message == ui.MSG_LOGGED_IN


def test_dashboard_loads_existing_tasks(connection):
    TaskStore(connection).add("alice", "write report")
    app = _dashboard(connection)
    assert [task.title for task in app.tasks] == ["write report"]


def test_add_task(connection):
    app = _dashboard(connection)
    _click(app, ui.TASK_INPUT_BOX)
    _type(app, "buy milk")
    _click(app, ui.ADD_TASK_BUTTON)
    assert app.task_field.text == ""
    assert [task.title for task in app.tasks] == ["buy milk"]
    assert [task.title for task in TaskStore(connection).fetch("alice")] == ["buy milk"]


def test_add_empty_task_does_nothing(connection):
    app = _dashboard(connection)
    _click(app, ui.ADD_TASK_BUTTON)
    assert app.tasks == []
    assert TaskStore(connection).fetch("alice") == []


def test_done_button_completes_task(connection):
    TaskStore(connection).add("alice", "one")
    TaskStore(connection).add("alice", "two")
    app = _dashboard(connection)
    _click(app, ui.done_button(1))
    assert [task.completed for task in app.tasks] == [False, True]


def test_delete_button_removes_task(connection):
    TaskStore(connection).add("alice", "one")
    TaskStore(connection).add("alice", "two")
    app = _dashboard(connection)
    _click(app, ui.delete_button(0))
    assert [task.title for task in app.tasks] == ["two"]
    assert len(TaskStore(connection).fetch("alice")) == 1


def test_tasks_are_per_user(connection):
    TaskStore(connection).add("carol", "hidden")
    app = _dashboard(connection)
    assert app.tasks == []


def test_draw_popup(app):
    _click(app, ui.SUBMIT_BUTTON)
    surface = pygame.Surface(ui.WINDOW_SIZE)
    app.draw(surface, (0, 0))
    assert tuple(surface.get_at((ui.POPUP_BOX.x + 2, ui.POPUP_BOX.y + 2)))[:3] == ui.RED
    assert tuple(surface.get_at((2, 2)))[:3] == ui.RAYWHITE


def test_draw_dashboard_rows(connection):
    TaskStore(connection).add("alice", "one")
    app = _dashboard(connection)
    surface = pygame.Surface(ui.WINDOW_SIZE)
    app.draw(surface, (0, 0))
    delete = ui.delete_button(0)
    assert tuple(surface.get_at((delete.x + 2, delete.y + 2)))[:3] == ui.RED
    hovered = ui.ADD_TASK_BUTTON
    app.draw(surface, _center(hovered))
    assert tuple(surface.get_at((hovered.x + 2, hovered.y + 2)))[:3] == ui.DARKGRAY


def test_main_fails_on_unopenable_database(tmp_path):
    assert ui.main(["--database", str(tmp_path)]) == 1