from .entity import Showing as Showing
from .factory import ShowingDetails as ShowingDetails
from .factory import ShowingFactory as ShowingFactory
from .service import DiscountPolicy as DiscountPolicy
from .service import default_discount_policy as default_discount_policy
