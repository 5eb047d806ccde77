"""
Order composition workflow: form editing, quote, then confirm.

States:
    IDLE -> VALIDATING -> QUOTE_REQUESTED -> QUOTE_RECEIVED
         -> CONFIRM_REQUESTED -> CONFIRMED

ERROR is reachable from VALIDATING, QUOTE_REQUESTED and CONFIRM_REQUESTED.
Dismissing an error returns to the state the failed step started from.
Validation failures never reach the network.
"""

import logging
from enum import Enum
from typing import Any

from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.application.payloads import build_confirm_payload, build_order_payload
from vendor_app.domain.entities.order_form import OrderForm
from vendor_app.domain.errors import (
    ApiError,
    InvalidTransitionError,
    ReorderNotAllowedError,
    ValidationError,
)
from vendor_app.domain.value_objects.car_type import CarType
from vendor_app.domain.value_objects.distribution import DistributionTarget
from vendor_app.domain.value_objects.hourly_package import (
    DEFAULT_PACKAGES,
    HourlyPackage,
    parse_packages,
)
from vendor_app.domain.value_objects.trip_type import TripType

QUOTE_FAILED_MESSAGE = "Failed to generate quote. Please try again."
CONFIRM_FAILED_MESSAGE = "Failed to create order. Please try again."


class OrderWorkflowState(str, Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    QUOTE_REQUESTED = "QUOTE_REQUESTED"
    QUOTE_RECEIVED = "QUOTE_RECEIVED"
    CONFIRM_REQUESTED = "CONFIRM_REQUESTED"
    CONFIRMED = "CONFIRMED"
    ERROR = "ERROR"


_QUOTABLE = {
    OrderWorkflowState.IDLE,
    OrderWorkflowState.QUOTE_RECEIVED,
    OrderWorkflowState.CONFIRMED,
}


class OrderComposer:
    """
    One order-creation session.

    Owns its OrderForm exclusively. Network calls are awaited in sequence;
    while one is in flight is_loading is set and any further trigger is
    rejected instead of queued.
    """

    def __init__(
        self,
        backend: VendorBackend,
        vendor_id: str,
        default_car_type: CarType = CarType.HATCHBACK,
        default_max_time_hours: int = 0,
        default_max_time_minutes: int = 10,
    ) -> None:
        self._backend = backend
        self._vendor_id = vendor_id
        self._default_car_type = default_car_type
        self._default_max_time = (default_max_time_hours, default_max_time_minutes)
        self._logger = logging.getLogger(__name__)

        self.form = self._new_form()
        self.packages: list[HourlyPackage] = list(DEFAULT_PACKAGES)
        self.state = OrderWorkflowState.IDLE
        self.is_loading = False
        self.quote: dict[str, Any] | None = None
        self.order: dict[str, Any] | None = None
        self.error_message: str | None = None
        self.error_field: str | None = None
        self._error_origin: OrderWorkflowState | None = None
        self._validated = False
        self._packages_loaded = False

    # --- session setup ---

    async def load_packages(self) -> list[HourlyPackage]:
        """Fetch hourly packages once per session; keep the built-in list on failure."""
        if self._packages_loaded:
            return self.packages
        self._packages_loaded = True
        try:
            body = await self._backend.get_package_hours()
        except ApiError as exc:
            self._logger.error(
                "Failed to fetch package hours",
                extra={"error_code": exc.code, "http_status": exc.status_code},
            )
            return self.packages

        packages = parse_packages(body)
        if packages is None:
            self._logger.warning("Package hours response unusable, keeping defaults")
            return self.packages
        self.packages = packages
        return self.packages

    # --- form editing ---

    def update_form(self, **changes: Any) -> None:
        """Apply form edits. A rejected batch changes neither the form nor the workflow."""
        self._ensure_not_loading()
        if changes.get("package") is not None:
            self._ensure_offered(changes["package"])
        self.form.update(**changes)
        self._before_edit()

    def change_trip_type(self, trip_type: TripType | str) -> None:
        self._before_edit()
        self.form.change_trip_type(trip_type)

    def set_location(self, position: int, value: str) -> bool:
        self.form.locations.ensure_editable(position)
        self._before_edit()
        return self.form.locations.set_location(position, value)

    def add_stop(self) -> bool:
        self._before_edit()
        return self.form.locations.add_stop()

    def remove_stop(self, position: int) -> bool:
        self._before_edit()
        return self.form.locations.remove(position)

    def move_stop(self, from_index: int, to_index: int) -> bool:
        if not self.form.policy.reorderable:
            raise ReorderNotAllowedError(self.form.trip_type.label)
        self._before_edit()
        return self.form.locations.move(from_index, to_index)

    # --- workflow ---

    async def request_quote(self) -> OrderWorkflowState:
        self._guard("request a quote", _QUOTABLE)
        if self.state is OrderWorkflowState.CONFIRMED:
            self.order = None

        if not self._validated:
            self.state = OrderWorkflowState.VALIDATING
            try:
                self.form.validate()
            except ValidationError as exc:
                self._fail(exc.message, origin=OrderWorkflowState.IDLE, field=exc.field)
                return self.state
            self._validated = True

        self.state = OrderWorkflowState.QUOTE_REQUESTED
        self.quote = None
        request = build_order_payload(self.form)
        self.is_loading = True
        try:
            self.quote = await self._backend.request_quote(request)
        except ApiError as exc:
            self._logger.error(
                "Error creating quote",
                extra={"error_code": exc.code, "trip_type": self.form.trip_type.value},
            )
            self._fail(
                exc.user_message(QUOTE_FAILED_MESSAGE, prefer_detail=True),
                origin=OrderWorkflowState.IDLE,
            )
            return self.state
        finally:
            self.is_loading = False

        self.state = OrderWorkflowState.QUOTE_RECEIVED
        self._logger.info("Quote generated", extra={"trip_type": self.form.trip_type.value})
        return self.state

    async def confirm(self, target: DistributionTarget | None = None) -> OrderWorkflowState:
        """Create the order from the received quote, distributed to the given target."""
        self._guard("confirm the order", {OrderWorkflowState.QUOTE_RECEIVED})
        target = target or DistributionTarget.everyone()

        self.state = OrderWorkflowState.CONFIRM_REQUESTED
        request = build_confirm_payload(self.form, target)
        self.is_loading = True
        try:
            order = await self._backend.confirm_order(request)
        except ApiError as exc:
            self._logger.error(
                "Error creating order",
                extra={"error_code": exc.code, "send_to": target.send_to.value},
            )
            self._fail(
                exc.user_message(CONFIRM_FAILED_MESSAGE, prefer_detail=True),
                origin=OrderWorkflowState.QUOTE_RECEIVED,
            )
            return self.state
        finally:
            self.is_loading = False

        self._logger.info("Order created", extra={"send_to": target.send_to.value})
        self.reset()
        self.order = order
        self.state = OrderWorkflowState.CONFIRMED
        return self.state

    def dismiss_error(self) -> OrderWorkflowState:
        if self.state is not OrderWorkflowState.ERROR:
            raise InvalidTransitionError(self.state.value, "dismiss an error")
        self.state = self._error_origin or OrderWorkflowState.IDLE
        self.error_message = None
        self.error_field = None
        self._error_origin = None
        return self.state

    def reset(self) -> None:
        """Back to session defaults. Loaded packages are kept."""
        self.form = self._new_form()
        self.state = OrderWorkflowState.IDLE
        self.quote = None
        self.order = None
        self.error_message = None
        self.error_field = None
        self._error_origin = None
        self._validated = False

    # --- internals ---

    def _new_form(self) -> OrderForm:
        hours, minutes = self._default_max_time
        return OrderForm(
            vendor_id=self._vendor_id,
            car_type=self._default_car_type,
            max_time_hours=hours,
            max_time_minutes=minutes,
        )

    def _guard(self, action: str, allowed: set[OrderWorkflowState]) -> None:
        if self.is_loading or self.state not in allowed:
            raise InvalidTransitionError(self.state.value, action)

    def _ensure_not_loading(self) -> None:
        if self.is_loading:
            raise InvalidTransitionError(self.state.value, "edit the form")

    def _ensure_offered(self, package: Any) -> None:
        try:
            selected = package if isinstance(package, HourlyPackage) else HourlyPackage.from_payload(package)
        except (KeyError, TypeError, ValueError):
            raise ValidationError("package", "Please select package hours")
        if selected not in self.packages:
            raise ValidationError("package", "Please select package hours")

    def _before_edit(self) -> None:
        # Any edit invalidates a received quote and the previous validation.
        self._ensure_not_loading()
        self.state = OrderWorkflowState.IDLE
        self.quote = None
        self.order = None
        self.error_message = None
        self.error_field = None
        self._error_origin = None
        self._validated = False

    def _fail(self, message: str, origin: OrderWorkflowState, field: str | None = None) -> None:
        self.state = OrderWorkflowState.ERROR
        self.error_message = message
        self.error_field = field
        self._error_origin = origin
