"""Appointments page object: list and calendar views, scheduling form, cancellation flow."""

from __future__ import annotations

from ..data import AppointmentForm
from ..logging_utils import get_logger
from .base_page import BasePage
from .selectors import Selector, text_match

logger = get_logger("pages")


class AppointmentsPage(BasePage):
    """Page object for the appointment scheduling screen."""

    path = "/appointments"

    # View toggles
    list_view_button = Selector('button:has-text("List View")', '[data-view="list"]')
    calendar_view_button = Selector('button:has-text("Calendar View")', '[data-view="calendar"]')

    # List view
    appointments_list = Selector(".appointments-list", '[role="list"]')
    appointment_items = Selector(
        ".appointment-item", '[role="listitem"]', within="appointments_list"
    )

    # Calendar view
    calendar = Selector(".calendar", '[role="calendar"]')
    calendar_days = Selector(".calendar-day", '[role="gridcell"]', within="calendar")
    current_month_label = Selector(".month-label", ".current-month", within="calendar")
    next_month_button = Selector('button:has-text("Next")', ".next-month", within="calendar")
    previous_month_button = Selector(
        'button:has-text("Previous")', ".prev-month", within="calendar"
    )

    # Filters
    date_filter_input = Selector('input[name="dateFilter"]', "#date-filter")
    service_type_filter = Selector('select[name="serviceType"]')
    status_filter = Selector('select[name="status"]')

    # Buttons
    schedule_new_button = Selector(
        'button:has-text("Schedule New")', 'button:has-text("New Appointment")'
    )
    save_button = Selector('button:has-text("Save")', 'button[type="submit"]')
    cancel_button = Selector('button:has-text("Cancel"):not(.cancel-appointment)')
    reschedule_button = Selector('button:has-text("Reschedule")')
    cancel_appointment_button = Selector(
        'button:has-text("Cancel Appointment")', ".cancel-appointment"
    )

    # Form fields
    customer_name_input = Selector('input[name="customerName"]')
    phone_number_input = Selector('input[name="phoneNumber"]', 'input[type="tel"]')
    email_input = Selector('input[name="email"]', 'input[type="email"]')
    service_type_dropdown = Selector('select[name="serviceType"]')
    vehicle_vin_input = Selector('input[name="vehicleVin"]')
    preferred_date_input = Selector('input[name="preferredDate"]', 'input[type="date"]')
    preferred_time_dropdown = Selector('select[name="preferredTime"]')
    notes_textarea = Selector('textarea[name="notes"]')

    # Validation and notifications
    form_error_message = Selector(".form-error", ".alert-danger")
    phone_number_error = Selector("#phone-error", '[data-error="phoneNumber"]')
    email_error = Selector("#email-error", '[data-error="email"]')
    success_notification = Selector(".success-notification", ".toast-success")

    # Details modal
    details_modal = Selector(".appointment-details", '[role="dialog"]')
    details_appointment_id = Selector(
        ".appointment-id", '[data-field="appointmentId"]', within="details_modal"
    )
    details_customer_name = Selector(
        ".customer-name", '[data-field="customerName"]', within="details_modal"
    )
    details_service_type = Selector(
        ".service-type", '[data-field="serviceType"]', within="details_modal"
    )
    details_scheduled_date = Selector(
        ".scheduled-date", '[data-field="scheduledDate"]', within="details_modal"
    )
    details_scheduled_time = Selector(
        ".scheduled-time", '[data-field="scheduledTime"]', within="details_modal"
    )
    details_status = Selector(".status", '[data-field="status"]', within="details_modal")
    close_modal_button = Selector(
        'button:has-text("Close")', ".close-button", within="details_modal"
    )

    # Cancellation confirmation
    confirmation_dialog = Selector('[role="alertdialog"]', ".confirmation-dialog")
    confirm_button = Selector(
        'button:has-text("Confirm")', 'button:has-text("Yes")', within="confirmation_dialog"
    )
    decline_button = Selector(
        'button:has-text("No")', 'button:has-text("Cancel")', within="confirmation_dialog"
    )

    _ITEM_FOR_CUSTOMER = '.appointment-item:has-text("{}")'
    _CALENDAR_DAY = '.calendar-day:has-text("{}")'

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def switch_to_list_view(self) -> None:
        self.actions.click(self.list_view_button)
        self.actions.wait_for_element(self.appointments_list)

    def switch_to_calendar_view(self) -> None:
        self.actions.click(self.calendar_view_button)
        self.actions.wait_for_element(self.calendar)

    # ------------------------------------------------------------------
    # List view
    # ------------------------------------------------------------------

    def get_appointment_count(self) -> int:
        return self.actions.count_matches(self.appointment_items)

    def click_appointment(self, customer_name: str) -> None:
        """Open the details modal for the first appointment mentioning ``customer_name``."""
        item = self.page.locator(text_match(self._ITEM_FOR_CUSTOMER, customer_name))
        self.actions.click(item)
        self.actions.wait_for_element(self.details_modal)

    # ------------------------------------------------------------------
    # Calendar view
    # ------------------------------------------------------------------

    def get_current_month(self) -> str:
        return self.actions.get_text(self.current_month_label)

    def go_to_next_month(self) -> str:
        """Advance one month; returns the new label once the calendar has re-rendered."""
        return self._step_month(self.next_month_button)

    def go_to_previous_month(self) -> str:
        return self._step_month(self.previous_month_button)

    def _step_month(self, button) -> str:
        before = self.get_current_month()
        self.actions.click(button)
        after = self.actions.wait_for_text_change(self.current_month_label, before)
        logger.debug("Calendar moved from %s to %s", before, after)
        return after

    def shift_months(self, steps: int) -> str:
        """Move ``steps`` months forward (negative moves back); returns the final label."""
        label = self.get_current_month()
        step = self.go_to_next_month if steps >= 0 else self.go_to_previous_month
        for _ in range(abs(steps)):
            label = step()
        return label

    def click_calendar_day(self, day: int) -> None:
        """Click the first day cell whose text contains ``day``."""
        self.actions.click(self.page.locator(text_match(self._CALENDAR_DAY, day)))

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def filter_by_service_type(self, service_type: str) -> None:
        self.actions.select_option(self.service_type_filter, service_type)
        self.actions.wait_for_page_settled()

    def filter_by_status(self, status: str) -> None:
        self.actions.select_option(self.status_filter, status)
        self.actions.wait_for_page_settled()

    def filter_by_date(self, date: str) -> None:
        self.actions.fill(self.date_filter_input, date)
        self.actions.wait_for_page_settled()

    # ------------------------------------------------------------------
    # Scheduling form
    # ------------------------------------------------------------------

    def click_schedule_new(self) -> None:
        self.actions.click(self.schedule_new_button)
        self.actions.wait_for_element(self.customer_name_input)

    def fill_appointment_form(self, appointment: AppointmentForm) -> None:
        """Fill only the supplied fields; ``None`` leaves the field as it is."""
        if appointment.customer_name is not None:
            self.actions.fill(self.customer_name_input, appointment.customer_name)
        if appointment.phone_number is not None:
            self.actions.fill(self.phone_number_input, appointment.phone_number)
        if appointment.email is not None:
            self.actions.fill(self.email_input, appointment.email)
        if appointment.service_type is not None:
            self.actions.select_option(self.service_type_dropdown, appointment.service_type)
        if appointment.vehicle_vin is not None:
            self.actions.fill(self.vehicle_vin_input, appointment.vehicle_vin)
        if appointment.preferred_date is not None:
            self.actions.fill(self.preferred_date_input, appointment.preferred_date)
        if appointment.preferred_time is not None:
            self.actions.select_option(self.preferred_time_dropdown, appointment.preferred_time)
        if appointment.notes is not None:
            self.actions.fill(self.notes_textarea, appointment.notes)

    def save_appointment(self) -> None:
        self.actions.click(self.save_button)
        self.actions.wait_for_page_settled()

    def cancel_form(self) -> None:
        self.actions.click(self.cancel_button)

    def schedule_appointment(self, appointment: AppointmentForm) -> None:
        self.click_schedule_new()
        self.fill_appointment_form(appointment)
        self.save_appointment()

    # ------------------------------------------------------------------
    # Reschedule / cancel
    # ------------------------------------------------------------------

    def click_reschedule(self) -> None:
        self.actions.click(self.reschedule_button)
        self.actions.wait_for_element(self.preferred_date_input)

    def click_cancel_appointment(self) -> None:
        self.actions.click(self.cancel_appointment_button)
        self.actions.wait_for_element(self.confirmation_dialog)

    def confirm_cancellation(self) -> None:
        self.actions.click(self.confirm_button)
        self.actions.wait_for_page_settled()

    def decline_cancellation(self) -> None:
        self.actions.click(self.decline_button)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def get_form_error(self) -> str:
        return self.actions.get_text(self.form_error_message)

    def get_phone_number_error(self) -> str:
        return self.actions.get_text(self.phone_number_error)

    def get_email_error(self) -> str:
        return self.actions.get_text(self.email_error)

    def has_form_error(self) -> bool:
        return self.actions.is_visible(self.form_error_message)

    def has_success_notification(self) -> bool:
        return self.actions.is_visible(self.success_notification)

    # ------------------------------------------------------------------
    # Details modal
    # ------------------------------------------------------------------

    def is_details_modal_open(self) -> bool:
        return self.actions.is_visible(self.details_modal)

    def get_details_appointment_id(self) -> str:
        return self.actions.get_text(self.details_appointment_id)

    def get_details_customer_name(self) -> str:
        return self.actions.get_text(self.details_customer_name)

    def get_details_service_type(self) -> str:
        return self.actions.get_text(self.details_service_type)

    def get_details_scheduled_date(self) -> str:
        return self.actions.get_text(self.details_scheduled_date)

    def get_details_scheduled_time(self) -> str:
        return self.actions.get_text(self.details_scheduled_time)

    def get_details_status(self) -> str:
        return self.actions.get_text(self.details_status)

    def close_details_modal(self) -> None:
        self.actions.click(self.close_modal_button)
        self.actions.wait_for_element_gone(self.details_modal)
