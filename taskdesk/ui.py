"""Interactive registration, login and task dashboard drawn with pygame."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

import pygame

from taskdesk.accounts import AccountStore, RegistrationError
from taskdesk.db import open_database
from taskdesk.store import Task, TaskStore
from taskdesk.widgets import Rect, TextField

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Task Manager"
FPS = 60

RAYWHITE = (245, 245, 245)
LIGHTGRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARKGRAY = (80, 80, 80)
BLUE = (0, 121, 241)
GREEN = (0, 228, 48)
RED = (230, 41, 55)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

USERNAME_BOX = Rect(250, 200, 300, 40)
PASSWORD_BOX = Rect(250, 270, 300, 40)
SUBMIT_BUTTON = Rect(300, 350, 200, 50)
POPUP_BOX = Rect(200, 250, 400, 100)
TASK_INPUT_BOX = Rect(20, 80, 400, 40)
ADD_TASK_BUTTON = Rect(440, 80, 100, 40)

TASK_ROW_TOP = 150
TASK_ROW_HEIGHT = 50

MSG_REGISTERED = "Registration successful! Redirecting to login..."
MSG_REGISTER_FAILED = "Username already exists or invalid input!"
MSG_EMPTY_FIELDS = "Please fill in all fields!"
MSG_LOGGED_IN = "Login successful! Redirecting to dashboard..."
MSG_LOGIN_FAILED = "Invalid username or password!"


class Screen(Enum):
    """Which page the window shows."""

    REGISTRATION = auto()
    LOGIN = auto()
    DASHBOARD = auto()


@dataclass
class Popup:
    """A message shown over the form until the next click."""

    message: str
    success: bool

    @property
    def color(self) -> tuple[int, int, int]:
        return GREEN if self.success else RED


@dataclass
class _CredentialsForm:
    username: TextField = field(default_factory=lambda: TextField("Username"))
    password: TextField = field(default_factory=lambda: TextField("Password"))

    @property
    def fields(self) -> tuple[TextField, TextField]:
        return self.username, self.password

    def focus_at(self, x: float, y: float) -> None:
        self.username.focused = USERNAME_BOX.contains(x, y)
        self.password.focused = PASSWORD_BOX.contains(x, y)


def done_button(row: int) -> Rect:
    """Rectangle of the "Done" button on task row *row*."""
    return Rect(600, TASK_ROW_TOP + row * TASK_ROW_HEIGHT, 60, 40)


def delete_button(row: int) -> Rect:
    """Rectangle of the "Del" button on task row *row*."""
    return Rect(670, TASK_ROW_TOP + row * TASK_ROW_HEIGHT, 60, 40)


class App:
    """State and event handling for the registration, login and dashboard screens."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.accounts = AccountStore(connection)
        self.store = TaskStore(connection)
        self.screen = Screen.REGISTRATION
        self.registration = _CredentialsForm()
        self.login = _CredentialsForm()
        self.task_field = TextField("Enter new task title...")
        self.username = ""
        self.tasks: list[Task] = []
        self.popup: Popup | None = None
        self._fonts: dict[int, pygame.font.Font] = {}

    # ----- events -------------------------------------------------------

    def handle_click(self, x: float, y: float) -> None:
        """React to a left mouse click at (x, y)."""
        self.popup = None
        if self.screen is Screen.REGISTRATION:
            self._click_registration(x, y)
        elif self.screen is Screen.LOGIN:
            self._click_login(x, y)
        else:
            self._click_dashboard(x, y)

    def _click_registration(self, x: float, y: float) -> None:
        form = self.registration
        form.focus_at(x, y)
        if not SUBMIT_BUTTON.contains(x, y):
            return
        if not (form.username.text and form.password.text):
            self.popup = Popup(MSG_EMPTY_FIELDS, success=False)
            return
        try:
            self.accounts.register(form.username.text, form.password.text)
        except RegistrationError:
            self.popup = Popup(MSG_REGISTER_FAILED, success=False)
            return
        self.popup = Popup(MSG_REGISTERED, success=True)
        self.screen = Screen.LOGIN

    def _click_login(self, x: float, y: float) -> None:
        form = self.login
        form.focus_at(x, y)
        if not SUBMIT_BUTTON.contains(x, y):
            return
        if self.accounts.login(form.username.text, form.password.text):
            self.popup = Popup(MSG_LOGGED_IN, success=True)
            self.username = form.username.text
            self.screen = Screen.DASHBOARD
            self._refresh_tasks()
        else:
            self.popup = Popup(MSG_LOGIN_FAILED, success=False)

    def _click_dashboard(self, x: float, y: float) -> None:
        self.task_field.focused = TASK_INPUT_BOX.contains(x, y)
        if ADD_TASK_BUTTON.contains(x, y) and self.task_field.text:
            self.store.add(self.username, self.task_field.text)
            self.task_field.clear()
            self._refresh_tasks()
            return
        for row, task in enumerate(self.tasks):
            if done_button(row).contains(x, y):
                self.store.mark_complete(task.id)
                self._refresh_tasks()
                return
            if delete_button(row).contains(x, y):
                self.store.delete(task.id)
                self._refresh_tasks()
                return

    def _refresh_tasks(self) -> None:
        self.tasks = self.store.fetch(self.username)

    def _active_fields(self) -> Sequence[TextField]:
        if self.screen is Screen.REGISTRATION:
            return self.registration.fields
        if self.screen is Screen.LOGIN:
            return self.login.fields
        return (self.task_field,)

    def _input_blocked(self) -> bool:
        return self.popup is not None and self.screen is not Screen.DASHBOARD

    def handle_char(self, char: str) -> None:
        """Type *char* into the focused field."""
        if self._input_blocked():
            return
        for text_field in self._active_fields():
            if text_field.focused:
                text_field.insert(char)

    def handle_backspace(self) -> None:
        """Delete the last character of the focused field."""
        if self._input_blocked():
            return
        for text_field in self._active_fields():
            if text_field.focused:
                text_field.backspace()

    # ----- drawing ------------------------------------------------------

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _text(self, surface, text: str, x: int, y: int, size: int, color) -> None:
        if text:
            surface.blit(self._font(size).render(text, True, color), (x, y))

    @staticmethod
    def _rect(surface, rect: Rect, color, width: int = 0) -> None:
        pygame.draw.rect(surface, color, (rect.x, rect.y, rect.width, rect.height), width)

    def _draw_field(self, surface, rect: Rect, text_field: TextField) -> None:
        self._rect(surface, rect, BLUE if text_field.focused else LIGHTGRAY, 1)
        if text_field.text:
            self._text(surface, text_field.text, rect.x + 5, rect.y + 8, 20, BLACK)
        elif not text_field.focused:
            self._text(surface, text_field.placeholder, rect.x + 5, rect.y + 8, 20, GRAY)

    def _draw_form(self, surface, mouse, title: str, form: _CredentialsForm) -> None:
        self._text(surface, title, 350, 120, 40, DARKGRAY)
        self._draw_field(surface, USERNAME_BOX, form.username)
        self._draw_field(surface, PASSWORD_BOX, form.password)
        hovered = SUBMIT_BUTTON.contains(*mouse)
        self._rect(surface, SUBMIT_BUTTON, DARKGRAY if hovered else LIGHTGRAY)
        self._text(surface, title, 355, 365, 20, BLACK)
        if self.popup is not None:
            self._rect(surface, POPUP_BOX, self.popup.color)
            self._text(surface, self.popup.message, 220, 290, 20, WHITE)

    def _draw_dashboard(self, surface, mouse) -> None:
        self._text(surface, f"Welcome, {self.username}!", 20, 20, 30, DARKGRAY)
        self._rect(surface, TASK_INPUT_BOX, LIGHTGRAY)
        self._rect(surface, TASK_INPUT_BOX, BLUE if self.task_field.focused else GRAY, 1)
        if self.task_field.text:
            self._text(surface, self.task_field.text, 25, 90, 20, BLACK)
        else:
            self._text(surface, self.task_field.placeholder, 25, 90, 20, GRAY)
        hovered = ADD_TASK_BUTTON.contains(*mouse)
        self._rect(surface, ADD_TASK_BUTTON, DARKGRAY if hovered else LIGHTGRAY)
        self._text(surface, "Add Task", 450, 90, 20, BLACK)

        for row, task in enumerate(self.tasks):
            top = TASK_ROW_TOP + row * TASK_ROW_HEIGHT
            self._text(surface, task.title, 50, top, 20, GRAY if task.completed else BLACK)
            self._rect(surface, done_button(row), LIGHTGRAY)
            self._text(surface, "Done", 610, top + 10, 20, DARKGRAY)
            self._rect(surface, delete_button(row), RED)
            self._text(surface, "Del", 685, top + 10, 20, WHITE)

    def draw(self, surface, mouse) -> None:
        """Render the current screen onto *surface*; *mouse* is the pointer position."""
        surface.fill(RAYWHITE)
        if self.screen is Screen.REGISTRATION:
            self._draw_form(surface, mouse, "Register", self.registration)
        elif self.screen is Screen.LOGIN:
            self._draw_form(surface, mouse, "Login", self.login)
        else:
            self._draw_dashboard(surface, mouse)

    # ----- main loop ----------------------------------------------------

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(*event.pos)
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
                        self.handle_backspace()
                    elif event.type == pygame.TEXTINPUT:
                        for char in event.text:
                            self.handle_char(char)
                self.draw(surface, pygame.mouse.get_pos())
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the task manager window."""
    parser = argparse.ArgumentParser(prog="taskdesk", description="Task manager with accounts.")
    parser.add_argument("--database", default="users.db", help="SQLite database file")
    args = parser.parse_args(argv)
    try:
        connection = open_database(args.database)
    except sqlite3.Error as exc:
        print(f"Failed to open database: {exc}", file=sys.stderr)
        return 1
    try:
        App(connection).run()
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())