"""Login page object."""

from __future__ import annotations

from ..data import Credentials
from .base_page import BasePage
from .selectors import Selector


class LoginPage(BasePage):
    """Page object for the DMS login/authentication screen."""

    path = "/login"

    username_input = Selector('input[name="username"]')
    password_input = Selector('input[name="password"]')
    login_button = Selector('button[type="submit"]')
    logout_button = Selector('button:has-text("Logout")')
    remember_me_checkbox = Selector('input[name="rememberMe"]')
    forgot_password_link = Selector('a:has-text("Forgot Password")')

    error_message = Selector(".error-message", ".alert-danger")
    success_message = Selector(".success-message", ".alert-success")
    username_error = Selector("#username-error", '[data-testid="username-error"]')
    password_error = Selector("#password-error", '[data-testid="password-error"]')

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def login(self, username: str, password: str) -> None:
        """Fill both fields, submit and wait for the resulting page to settle."""
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()
        self.actions.wait_for_page_settled()

    def login_as(self, credentials: Credentials) -> None:
        self.login(credentials.username, credentials.password)

    def login_with_remember_me(self, username: str, password: str) -> None:
        self.enter_username(username)
        self.enter_password(password)
        self.actions.check(self.remember_me_checkbox)
        self.click_login()
        self.actions.wait_for_page_settled()

    def enter_username(self, username: str) -> None:
        self.actions.fill(self.username_input, username)

    def enter_password(self, password: str) -> None:
        self.actions.fill(self.password_input, password)

    def click_login(self) -> None:
        self.actions.click(self.login_button)

    def click_forgot_password(self) -> None:
        self.actions.click(self.forgot_password_link)

    def logout(self) -> None:
        self.actions.click(self.logout_button)
        self.actions.wait_for_page_settled()

    def clear_form(self) -> None:
        self.actions.fill(self.username_input, "")
        self.actions.fill(self.password_input, "")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_error_message(self) -> bool:
        return self.actions.is_visible(self.error_message)

    def get_error_message(self) -> str:
        return self.actions.get_text(self.error_message)

    def has_success_message(self) -> bool:
        return self.actions.is_visible(self.success_message)

    def get_username_error(self) -> str:
        return self.actions.get_text(self.username_error)

    def get_password_error(self) -> str:
        return self.actions.get_text(self.password_error)

    def is_on_login_page(self) -> bool:
        return self.actions.url_contains(self.path)

    def is_logged_in(self) -> bool:
        """A visible logout button is the signal that a session exists."""
        return self.actions.is_visible(self.logout_button)

    def is_login_button_enabled(self) -> bool:
        return self.actions.is_enabled(self.login_button)

    def is_remember_me_checked(self) -> bool:
        return self.actions.is_checked(self.remember_me_checkbox)

    def get_username_value(self) -> str:
        return self.actions.get_value(self.username_input)

    def get_password_value(self) -> str:
        return self.actions.get_value(self.password_input)

    # ------------------------------------------------------------------
    # Waits
    # ------------------------------------------------------------------

    def wait_for_error_message(self, timeout: float | None = None) -> None:
        self.actions.wait_for_element(self.error_message, timeout)

    def wait_for_success_message(self, timeout: float | None = None) -> None:
        self.actions.wait_for_element(self.success_message, timeout)
