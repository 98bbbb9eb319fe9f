from .discount_policy import DiscountPolicy as DiscountPolicy
from .discount_policy import default_discount_policy as default_discount_policy
