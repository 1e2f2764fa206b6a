from __future__ import annotations

import logging

from tool_rental.domain.charge_days import calculate_charge_days
from tool_rental.domain.errors import NotFoundError
from tool_rental.domain.holidays import US_OBSERVED_HOLIDAYS, HolidayCalendar
from tool_rental.domain.pricing import calculate_charges
from tool_rental.domain.rental import RentalAgreement, RentalRequest
from tool_rental.ports.tool_inventory import ToolInventory

logger = logging.getLogger(__name__)


class CheckoutTool:
    """
    Check out a tool and produce its rental agreement.

    Flow:
    - Validate rental_days and discount_percent before touching the inventory
    - Resolve the tool; unknown codes are a caller error (NotFoundError)
    - Unavailable tools yield None plus an INFO notice, with no state change
    - Compute charge days and charges, then reserve the tool

    The reservation is the only side effect and happens last, so a failed
    calculation never leaves a tool marked as rented.
    """

    def __init__(
        self,
        tool_inventory: ToolInventory,
        holiday_calendar: HolidayCalendar = US_OBSERVED_HOLIDAYS,
    ) -> None:
        self._inventory = tool_inventory
        self._holiday_calendar = holiday_calendar

    def execute(self, request: RentalRequest) -> RentalAgreement | None:
        """
        Execute the checkout.

        Args:
            request: Tool code, rental days, discount percent and checkout date

        Returns:
            The rental agreement, or None if the tool is not available to rent

        Raises:
            InvalidRentalInput: If rental_days < 1, the due date would pass date.max,
                or discount_percent is outside 0..100
            NotFoundError: If no tool has the given code
        """
        request.validate()

        tool = self._inventory.get_by_code(request.tool_code)
        if tool is None:
            raise NotFoundError(resource="Tool", identifier=request.tool_code)

        if not tool.available:
            self._notify_unavailable(request.tool_code)
            return None

        due_date = request.due_date

        charge_days = calculate_charge_days(
            checkout_date=request.checkout_date,
            due_date=due_date,
            weekday_charge=tool.weekday_charge,
            weekend_charge=tool.weekend_charge,
            holiday_charge=tool.holiday_charge,
            holiday_calendar=self._holiday_calendar,
        )
        charges = calculate_charges(
            charge_days=charge_days,
            daily_charge=tool.daily_charge,
            discount_percent=request.discount_percent,
        )

        # Another checkout may have reserved the tool since the lookup
        if not self._inventory.try_reserve(tool.code):
            self._notify_unavailable(request.tool_code)
            return None

        logger.info(
            "Tool checked out",
            extra={
                "tool_code": tool.code,
                "rental_days": request.rental_days,
                "charge_days": charge_days,
                "final_charge": str(charges.final_charge),
            },
        )

        return RentalAgreement(
            tool_code=tool.code,
            tool_type=tool.tool_type,
            tool_brand=tool.brand,
            rental_days=request.rental_days,
            charge_days=charge_days,
            checkout_date=request.checkout_date,
            due_date=due_date,
            daily_charge=tool.daily_charge,
            pre_discount_charge=charges.pre_discount_charge,
            discount_percent=request.discount_percent,
            discount_amount=charges.discount_amount,
            final_charge=charges.final_charge,
        )

    def _notify_unavailable(self, tool_code: str) -> None:
        logger.info(
            f"Tool with tool code: {tool_code} is not available to rent.",
            extra={"tool_code": tool_code},
        )
