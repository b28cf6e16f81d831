from .views import CartLineView, MembershipView, OrderItemView, OrderPage, OrderView, PagingView

__all__ = [
    "CartLineView",
    "MembershipView",
    "OrderItemView",
    "OrderPage",
    "OrderView",
    "PagingView",
]
