from __future__ import annotations

from tool_rental.domain.rental import RentalAgreement, RentalRequest
from tool_rental.entrypoints.http.dtos.checkout import CheckoutRequestDTO, CheckoutResponseDTO
from tool_rental.entrypoints.text.agreement_report import format_agreement


class CheckoutMapper:
    """Maps between REST DTOs and domain models for checkout."""

    @staticmethod
    def to_domain_request(dto: CheckoutRequestDTO) -> RentalRequest:
        """
        Converts request DTO to domain RentalRequest.

        Range checks on rental_days and discount_percent are left to the
        domain so clients see the same messages as every other caller.
        """
        return RentalRequest(
            tool_code=dto.tool_code,
            rental_days=dto.rental_days,
            discount_percent=dto.discount_percent,
            checkout_date=dto.checkout_date,
        )

    @staticmethod
    def to_response(agreement: RentalAgreement) -> CheckoutResponseDTO:
        """
        Converts domain RentalAgreement to response DTO.

        Handles Decimal → string conversion at the boundary and attaches the
        printable report.
        """
        return CheckoutResponseDTO(
            tool_code=agreement.tool_code,
            tool_type=agreement.tool_type.value,
            tool_brand=agreement.tool_brand.value,
            rental_days=agreement.rental_days,
            charge_days=agreement.charge_days,
            checkout_date=agreement.checkout_date,
            due_date=agreement.due_date,
            daily_charge=str(agreement.daily_charge),
            pre_discount_charge=str(agreement.pre_discount_charge),
            discount_percent=agreement.discount_percent,
            discount_amount=str(agreement.discount_amount),
            final_charge=str(agreement.final_charge),
            report=format_agreement(agreement),
        )
