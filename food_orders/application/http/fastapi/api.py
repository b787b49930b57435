from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_orders.adapters.db.sqlalchemy.database import build_engine, build_session_factory
from food_orders.adapters.db.sqlalchemy.uow import SQLAlchemyUnitOfWork
from food_orders.application.dto import CartLineInput, RegisterOrderInput
from food_orders.application.http.fastapi.schemas import (
    CartLineRequest,
    OrderResponse,
    PricedCartResponse,
    RegisterOrderRequest,
)
from food_orders.application.ports import UnitOfWork
from food_orders.application.use_cases.delivery_status import ChangeDeliveryStatusUseCase
from food_orders.application.use_cases.list_orders import ListOrdersUseCase
from food_orders.application.use_cases.price_cart import PriceCartUseCase
from food_orders.application.use_cases.register_order import RegisterOrderUseCase
from food_orders.config import get_settings
from food_orders.domain.errors import DomainError, ErrorKind, ValidationFailedError
from food_orders.domain.order import OrderLine
from food_orders.utils.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)

# (uvicorn food_orders.application.http.fastapi.api:app --reload)
# http://127.0.0.1:8000/docs

settings = get_settings()
configure_logging(settings)
logger = get_logger(__name__)

engine = build_engine(settings)
SessionLocal = build_session_factory(engine)

app = FastAPI(title="food-orders")


def to_http_exception(error: DomainError, not_found_status: int = 400) -> HTTPException:
    # NOT_FOUND is 404 only where the missing thing is the addressed resource
    status_code = not_found_status if error.kind is ErrorKind.NOT_FOUND else 400
    return HTTPException(status_code=status_code, detail=error.to_dict())


@app.middleware("http")
async def reset_log_context(request: Request, call_next):
    clear_request_context()
    bind_request_context(method=request.method, path=request.url.path)
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationFailedError(["Invalid request payload."])
    return JSONResponse(
        status_code=400,
        content={"detail": {**error.to_dict(), "violations": jsonable_encoder(exc.errors())}},
    )


def get_uow() -> UnitOfWork:
    return SQLAlchemyUnitOfWork(SessionLocal)


async def get_consumer_id(x_consumer_id: int = Header(...)) -> int:
    # authentication happens upstream; the header carries the resolved consumer.
    # must stay async: sync dependencies run on a copied context
    bind_request_context(consumer_id=x_consumer_id)
    return x_consumer_id


def get_price_cart_uc(uow: UnitOfWork = Depends(get_uow)):
    return PriceCartUseCase(uow=uow)


def get_register_order_uc(uow: UnitOfWork = Depends(get_uow)):
    return RegisterOrderUseCase(uow=uow)


def get_list_orders_uc(uow: UnitOfWork = Depends(get_uow)):
    return ListOrdersUseCase(uow=uow)


def get_delivery_status_uc(uow: UnitOfWork = Depends(get_uow)):
    return ChangeDeliveryStatusUseCase(uow=uow)


def internal_error() -> HTTPException:
    logger.exception("Unhandled error while processing request")
    return HTTPException(status_code=500, detail="internal server error")


@app.post("/api/cart/quote", response_model=PricedCartResponse)
def quote_cart(
    cart: list[CartLineRequest],
    uc: PriceCartUseCase = Depends(get_price_cart_uc),
):
    try:
        quote = uc.execute([CartLineInput(**line.model_dump()) for line in cart])
        return quote.model_dump()
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        raise internal_error()


@app.post("/api/orders")
def register_order(
    data: RegisterOrderRequest,
    consumer_id: int = Depends(get_consumer_id),
    uc: RegisterOrderUseCase = Depends(get_register_order_uc),
):
    try:
        uc.execute(
            RegisterOrderInput(
                consumer_id=consumer_id,
                restaurant_id=data.restaurant_id,
                subtotal=data.subtotal,
                delivery_fee=data.delivery_fee,
                total=data.total,
                products=[
                    OrderLine(
                        product_id=product.id,
                        quantity=product.quantity,
                        price=product.price,
                        subtotal=product.subtotal,
                    ) for product in data.products
                ],
            )
        )
        return Response(status_code=200)
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        raise internal_error()


@app.get("/api/orders", response_model=list[OrderResponse])
def list_orders(
    delivered: bool = False,
    consumer_id: int = Depends(get_consumer_id),
    uc: ListOrdersUseCase = Depends(get_list_orders_uc),
):
    try:
        return [order.model_dump() for order in uc.execute(consumer_id, delivered)]
    except DomainError as e:
        raise to_http_exception(e, not_found_status=404)
    except Exception:
        raise internal_error()


@app.patch("/api/orders/{order_id}/delivered")
def mark_delivered(
    order_id: int,
    consumer_id: int = Depends(get_consumer_id),
    uc: ChangeDeliveryStatusUseCase = Depends(get_delivery_status_uc),
):
    try:
        uc.mark_delivered(order_id, consumer_id)
        return Response(status_code=200)
    except DomainError as e:
        raise to_http_exception(e, not_found_status=404)
    except Exception:
        raise internal_error()


@app.patch("/api/orders/{order_id}/undelivered")
def mark_undelivered(
    order_id: int,
    consumer_id: int = Depends(get_consumer_id),
    uc: ChangeDeliveryStatusUseCase = Depends(get_delivery_status_uc),
):
    try:
        uc.mark_undelivered(order_id, consumer_id)
        return Response(status_code=200)
    except DomainError as e:
        raise to_http_exception(e, not_found_status=404)
    except Exception:
        raise internal_error()
