"""Page Object Model classes for the DMS screens."""

from .actions import PageActions
from .appointments_page import AppointmentsPage
from .base_page import BasePage
from .login_page import LoginPage
from .repair_orders_page import PaginationInfo, RepairOrdersPage, parse_pagination_info
from .selectors import Selector

__all__ = [
    "AppointmentsPage",
    "BasePage",
    "LoginPage",
    "PageActions",
    "PaginationInfo",
    "RepairOrdersPage",
    "Selector",
    "parse_pagination_info",
]
