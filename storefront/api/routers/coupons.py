from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.errors import InvalidCoupon
from storefront.domain.schemas import CouponCheckIn, CouponCheckOut
from storefront.services.coupon_service import CouponService

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.post("/check", response_model=CouponCheckOut, response_model_exclude_none=True)
def check_coupon(
    payload: CouponCheckIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Sprawdza kupon przed checkoutem, nic nie zapisuje.
    Niewazny jeszcze kupon to 200 z valid=false, nie blad.
    """
    code = payload.code.strip()
    if not code:
        raise HTTPException(status_code=400, detail="Coupon code is required")

    svc = CouponService(db)
    try:
        return svc.check_eligibility(user.id, code)
    except InvalidCoupon as e:
        raise HTTPException(status_code=404, detail=str(e))
