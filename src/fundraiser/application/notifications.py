"""Plain-text bodies for the two order emails."""

from __future__ import annotations

from fundraiser.domain.model.order_record import OrderRecord

ADMIN_SUBJECT = "New Shirt Order"
CUSTOMER_SUBJECT = "Your Shirt Order Confirmation"

_RULE = "-----------------------"


def _numbered(lines: tuple[str, ...], count: int) -> str:
    if not count:
        return "  (none)"
    return "\n".join(f"  {idx}. {name}" for idx, name in enumerate(lines, start=1))


def _payment_prompt(payment_link: str) -> str:
    return (
        "If you did not process your payment at checkout, "
        "please click here to finish payment:\n"
        f"{payment_link}\n"
    )


def _line_details(record: OrderRecord) -> str:
    return (
        f"Supporter Lines Purchased: {record.player_line_count}\n"
        "Supporter Names:\n"
        f"{_numbered(record.player_lines, record.player_line_count)}\n"
        "\n"
        f"Business Design Purchased: {record.business_design}\n"
        f"Business Lines Purchased: {record.business_line_count}\n"
        "Business Names:\n"
        f"{_numbered(record.business_lines, record.business_line_count)}\n"
        "\n"
        f"Total Amount: ${record.total_amount}\n"
    )


def render_admin_notification(record: OrderRecord, payment_link: str) -> str:
    """Full order detail for the fundraiser operator."""
    return (
        f"{ADMIN_SUBJECT}\n"
        "\n"
        f"Date/Time: {record.timestamp_text}\n"
        "\n"
        f"Player Name: {record.player_name}\n"
        f"Team/Coach: {record.team_name}\n"
        f"Customer Email: {record.email}\n"
        f"Shirt Size: {record.shirt_size}\n"
        "\n"
        f"{_line_details(record)}"
        "\n"
        f"{_payment_prompt(payment_link)}"
    )


def render_customer_notification(
    record: OrderRecord, payment_link: str, sales_address: str
) -> str:
    """Order summary and payment call-to-action for the customer.

    A business design needs artwork, so those orders also get a
    reminder to send the logo to the sales mailbox.
    """
    body = (
        "Thank you for your order!\n"
        "\n"
        "Order Summary\n"
        f"{_RULE}\n"
        f"Player Name: {record.player_name}\n"
        f"Team/Coach: {record.team_name}\n"
        f"Email: {record.email}\n"
        f"Shirt Size: {record.shirt_size}\n"
        "\n"
        f"{_line_details(record)}"
        f"{_RULE}\n"
        "\n"
        f"{_payment_prompt(payment_link)}"
    )
    if record.business_design_requested:
        body += (
            "\n"
            "Business design reminder: please email your logo file to "
            f"{sales_address} so we can add it to the shirt.\n"
        )
    return body
