# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, get_lock_service
from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.domain.errors import ConflictError, NotFoundError
from storefront.domain.schemas import CheckoutIn, CheckoutOut, OrderOut
from storefront.services.checkout_service import CheckoutService
from storefront.services.lock_service import LockService

router = APIRouter(prefix="/checkout", tags=["checkout"])


def get_service(db: Session, lock_service: LockService):
    return CheckoutService(db, lock_service)


@router.post(
    "",
    response_model=CheckoutOut,
    status_code=201,
    responses={200: {"model": CheckoutOut, "description": "Coupon not yet eligible, nothing created"}},
)
def checkout(
    payload: CheckoutIn | None = None,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    """
    Tworzy zamówienie z koszyka usera i czyści koszyk.
    Kupon niedostepny w tym zamowieniu -> 200 {valid: false, message}.
    """
    svc = get_service(db, lock_service)
    coupon_code = payload.coupon_code if payload else None
    try:
        result = svc.checkout(user.id, coupon_code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not result.valid:
        return JSONResponse(
            status_code=200,
            content={"valid": False, "message": result.message},
        )

    return CheckoutOut(
        valid=True,
        message=result.message,
        order=OrderOut.model_validate(result.order),
        discount_applied=result.discount_applied,
    )
