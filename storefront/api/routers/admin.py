from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_admin_user
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.errors import CouponAlreadyExists
from storefront.domain.schemas import AnalyticsOut, CouponCreate, CouponOut
from storefront.services.analytics_service import AnalyticsService
from storefront.services.coupon_service import CouponService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/coupons", response_model=CouponOut, status_code=201)
def create_coupon(
    payload: CouponCreate,
    admin: UserModel = Depends(get_admin_user),
    db: Session = Depends(get_db),
):
    code = payload.code.strip()
    if not code:
        raise HTTPException(status_code=400, detail="Code and percentage_off are required")

    svc = CouponService(db)
    try:
        return svc.create_coupon(code, payload.percentage_off)
    except CouponAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/analytics", response_model=AnalyticsOut)
def analytics(
    admin: UserModel = Depends(get_admin_user),
    db: Session = Depends(get_db),
):
    return AnalyticsService(db).get_analytics()
