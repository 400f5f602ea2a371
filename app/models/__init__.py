# app/models/__init__.py

from .user.user import User
from .cart.cart import Cart
from .cart.cart_item import CartItem
from .company.store_setting import StoreSetting
