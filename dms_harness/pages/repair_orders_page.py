"""Repair orders page object: search, filters, results table, form and details panel."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..data import RepairOrderForm
from .base_page import BasePage
from .selectors import Selector, text_match

_PAGINATION_RE = re.compile(r"(\d+)\s*(?:-|\u2013|to)\s*(\d+)\s+of\s+(\d+)", re.IGNORECASE)


@dataclass(frozen=True)
class PaginationInfo:
    first: int
    last: int
    total: int

    @property
    def is_last_page(self) -> bool:
        return self.last >= self.total


def parse_pagination_info(text: str) -> PaginationInfo | None:
    """Parse "Showing 1-10 of 50" style summaries; ``None`` when the text has no range."""
    match = _PAGINATION_RE.search(text)
    if match is None:
        return None
    first, last, total = (int(group) for group in match.groups())
    return PaginationInfo(first, last, total)


class RepairOrdersPage(BasePage):
    """Page object for the repair-order management screen."""

    path = "/repair-orders"

    # Search and filters
    search_input = Selector('input[placeholder*="Search"]', "#search-input")
    search_button = Selector('button:has-text("Search")', 'button[type="submit"]')
    clear_search_button = Selector('button:has-text("Clear")')
    status_filter = Selector('select[name="status"]', "#status-filter")
    customer_filter = Selector('input[name="customer"]')
    start_date_input = Selector('input[name="startDate"]', "#start-date")
    end_date_input = Selector('input[name="endDate"]', "#end-date")

    # Results table
    results_table = Selector("table", '[role="table"]', ".results-table")
    table_rows = Selector("tbody tr", '[role="row"]', within="results_table")
    no_results_message = Selector(
        ".no-results", ".empty-state", ':has-text("No repair orders found")'
    )

    # Pagination
    next_page_button = Selector('button:has-text("Next")', ".pagination-next")
    previous_page_button = Selector('button:has-text("Previous")', ".pagination-prev")
    page_info = Selector(".pagination-info", ".page-info")

    # Create / edit form
    create_new_button = Selector(
        'button:has-text("Create New")', 'button:has-text("New Repair Order")'
    )
    save_button = Selector('button:has-text("Save")', 'button[type="submit"]')
    cancel_button = Selector('button:has-text("Cancel")')
    customer_name_input = Selector('input[name="customerName"]')
    vehicle_vin_input = Selector('input[name="vehicleVin"]')
    vehicle_make_input = Selector('input[name="vehicleMake"]')
    vehicle_model_input = Selector('input[name="vehicleModel"]')
    vehicle_year_input = Selector('input[name="vehicleYear"]')
    description_input = Selector('textarea[name="description"]')
    estimated_cost_input = Selector('input[name="estimatedCost"]')
    status_dropdown = Selector('select[name="status"]')
    form_error_message = Selector(".form-error", ".alert-danger")

    # Details panel
    details_panel = Selector(".details-panel", ".modal", '[role="dialog"]')
    details_order_number = Selector(
        ".order-number", '[data-field="orderNumber"]', within="details_panel"
    )
    details_customer_name = Selector(
        ".customer-name", '[data-field="customerName"]', within="details_panel"
    )
    details_vehicle_info = Selector(
        ".vehicle-info", '[data-field="vehicleInfo"]', within="details_panel"
    )
    details_status = Selector(".status", '[data-field="status"]', within="details_panel")
    details_description = Selector(
        ".description", '[data-field="description"]', within="details_panel"
    )
    close_details_button = Selector(
        'button:has-text("Close")', ".close-button", within="details_panel"
    )

    _ROW_FOR_ORDER = 'tr:has-text("{}")'
    _ORDER_NUMBER_CELL = "td:first-child"

    # RepairOrderForm field -> text input selector
    _FORM_INPUTS = (
        ("customer_name", "customer_name_input"),
        ("vehicle_vin", "vehicle_vin_input"),
        ("vehicle_make", "vehicle_make_input"),
        ("vehicle_model", "vehicle_model_input"),
        ("vehicle_year", "vehicle_year_input"),
        ("description", "description_input"),
        ("estimated_cost", "estimated_cost_input"),
    )

    # ------------------------------------------------------------------
    # Search and filters
    # ------------------------------------------------------------------

    def search(self, term: str) -> None:
        self.actions.fill(self.search_input, term)
        self.actions.click(self.search_button)
        self.actions.wait_for_page_settled()

    def clear_search(self) -> None:
        self.actions.click(self.clear_search_button)
        self.actions.wait_for_page_settled()

    def filter_by_status(self, status: str) -> None:
        self.actions.select_option(self.status_filter, status)
        self.actions.wait_for_page_settled()

    def filter_by_date_range(self, start_date: str, end_date: str) -> None:
        """Dates are ISO ``YYYY-MM-DD`` strings, as date inputs expect."""
        self.actions.fill(self.start_date_input, start_date)
        self.actions.fill(self.end_date_input, end_date)
        self.actions.wait_for_page_settled()

    def filter_by_customer(self, customer_name: str) -> None:
        self.actions.fill(self.customer_filter, customer_name)
        self.actions.wait_for_page_settled()

    # ------------------------------------------------------------------
    # Results table
    # ------------------------------------------------------------------

    def get_repair_order_count(self) -> int:
        return self.actions.count_matches(self.table_rows)

    def has_results(self) -> bool:
        return self.actions.is_visible(self.results_table)

    def has_no_results(self) -> bool:
        return self.actions.is_visible(self.no_results_message)

    def get_all_order_numbers(self) -> list[str]:
        """First-column text of every row, skipping rows whose cell is empty."""
        return self.actions.get_all_texts(self.table_rows.locator(self._ORDER_NUMBER_CELL))

    def has_order_number(self, order_number: str) -> bool:
        return order_number in self.get_all_order_numbers()

    def click_repair_order(self, order_number: str) -> None:
        """Open the details panel for the row containing ``order_number``."""
        row = self.page.locator(text_match(self._ROW_FOR_ORDER, order_number))
        self.actions.click(row)
        self.actions.wait_for_element(self.details_panel)

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def go_to_next_page(self) -> None:
        self.actions.click(self.next_page_button)
        self.actions.wait_for_page_settled()

    def go_to_previous_page(self) -> None:
        self.actions.click(self.previous_page_button)
        self.actions.wait_for_page_settled()

    def get_pagination_info(self) -> str:
        return self.actions.get_text(self.page_info)

    def get_pagination_summary(self) -> PaginationInfo | None:
        return parse_pagination_info(self.get_pagination_info())

    def has_next_page(self) -> bool:
        return self.actions.is_enabled(self.next_page_button)

    # ------------------------------------------------------------------
    # Create / edit form
    # ------------------------------------------------------------------

    def click_create_new(self) -> None:
        self.actions.click(self.create_new_button)
        self.actions.wait_for_element(self.customer_name_input)

    def fill_repair_order_form(self, order: RepairOrderForm) -> None:
        """Fill only the supplied fields; fields left as ``None`` are untouched."""
        for field_name, selector_name in self._FORM_INPUTS:
            value = getattr(order, field_name)
            if value is not None:
                self.actions.fill(getattr(self, selector_name), value)
        if order.status is not None:
            self.actions.select_option(self.status_dropdown, order.status)

    def save_form(self) -> None:
        self.actions.click(self.save_button)
        self.actions.wait_for_page_settled()

    def cancel_form(self) -> None:
        self.actions.click(self.cancel_button)

    def create_repair_order(self, order: RepairOrderForm) -> None:
        self.click_create_new()
        self.fill_repair_order_form(order)
        self.save_form()

    def get_form_error(self) -> str:
        return self.actions.get_text(self.form_error_message)

    def has_form_error(self) -> bool:
        return self.actions.is_visible(self.form_error_message)

    # ------------------------------------------------------------------
    # Details panel
    # ------------------------------------------------------------------

    def is_details_panel_open(self) -> bool:
        return self.actions.is_visible(self.details_panel)

    def get_details_order_number(self) -> str:
        return self.actions.get_text(self.details_order_number)

    def get_details_customer_name(self) -> str:
        return self.actions.get_text(self.details_customer_name)

    def get_details_vehicle_info(self) -> str:
        return self.actions.get_text(self.details_vehicle_info)

    def get_details_status(self) -> str:
        return self.actions.get_text(self.details_status)

    def get_details_description(self) -> str:
        return self.actions.get_text(self.details_description)

    def close_details_panel(self) -> None:
        self.actions.click(self.close_details_button)
        self.actions.wait_for_element_gone(self.details_panel)
