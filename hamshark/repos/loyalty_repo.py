# hamshark/repos/loyalty_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hamshark.data.models.loyalty_reward import LoyaltyRewardModel
from hamshark.data.models.membership_plan import MembershipPlanModel
from hamshark.domain.models import LoyaltyReward, MembershipPlan


class RewardRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[LoyaltyReward]:
        rows = self.db.execute(select(LoyaltyRewardModel).order_by(LoyaltyRewardModel.id)).scalars().all()
        return [LoyaltyReward.model_validate(r, from_attributes=True) for r in rows]

    def add(self, reward: LoyaltyReward) -> LoyaltyReward:
        row = LoyaltyRewardModel(**reward.model_dump())
        self.db.add(row)
        self.db.commit()
        return reward


class PlanRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[MembershipPlan]:
        rows = self.db.execute(select(MembershipPlanModel).order_by(MembershipPlanModel.id)).scalars().all()
        return [MembershipPlan.model_validate(r, from_attributes=True) for r in rows]

    def get(self, plan_id: str) -> MembershipPlan | None:
        row = self.db.get(MembershipPlanModel, plan_id)
        return MembershipPlan.model_validate(row, from_attributes=True) if row else None

    def add(self, plan: MembershipPlan) -> MembershipPlan:
        row = MembershipPlanModel(**plan.model_dump())
        self.db.add(row)
        self.db.commit()
        return plan
