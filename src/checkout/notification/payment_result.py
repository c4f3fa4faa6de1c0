"""Payment result email — sent after an order is recorded, paid or declined."""

from html import escape

from checkout.config import cart_title


class PaymentResultTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        message = escape(context.get("message", ""))
        status = escape(context.get("status", ""))
        order_id = escape(str(context.get("order_id", "N/A")))
        transaction_id = escape(str(context.get("transaction_id", "N/A")))
        title = context.get("cart_title") or cart_title()
        return {
            "subject": f"Your payment with {title}",
            "html_body": (
                "<html><body>"
                f"<h2>{message}</h2>"
                f"<p><strong>Status: </strong>{status}</p>"
                f"<p><strong>Order ID: </strong>{order_id}</p>"
                f"<p><strong>Transaction ID: </strong>{transaction_id}</p>"
                f"<p>Thank you for shopping with {escape(title)}.</p>"
                "</body></html>"
            ),
        }
