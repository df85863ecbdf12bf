# import every model so create_all sees the whole schema
from hamshark.data.models.loyalty_reward import LoyaltyRewardModel
from hamshark.data.models.membership_plan import MembershipPlanModel
from hamshark.data.models.menu_item import MenuItemModel
from hamshark.data.models.order import OrderModel
from hamshark.data.models.truck_location import TruckLocationModel
from hamshark.data.models.user import UserModel

__all__ = [
    "LoyaltyRewardModel",
    "MembershipPlanModel",
    "MenuItemModel",
    "OrderModel",
    "TruckLocationModel",
    "UserModel",
]
