"""Order confirmation email — sent once an order is placed."""

import json


def _describe(item: dict) -> str:
    variant = ", ".join(v for v in (item.get("size"), item.get("color")) if v)
    name = f"{item['product_name']} ({variant})" if variant else item["product_name"]
    return f"  {item['quantity']} x {name} @ ${item['unit_price']}"


class OrderConfirmationTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        order_number = context.get("order_number", "N/A")
        customer_name = context.get("customer_name") or "there"
        lines = "\n".join(_describe(item) for item in json.loads(context.get("items") or "[]"))
        return {
            "subject": f"Order {order_number} confirmed",
            "body": (
                f"Hi {customer_name},\n\n"
                f"Thank you for your order {order_number}.\n\n"
                f"{lines}\n\n"
                f"Subtotal: ${context.get('subtotal', '0.00')}\n"
                f"Shipping: ${context.get('shipping', '0.00')}\n"
                f"Tax: ${context.get('tax', '0.00')}\n"
                f"Total: ${context.get('total', '0.00')}\n\n"
                "We'll let you know when your order ships."
            ),
        }
