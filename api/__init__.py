import fastapi
import logging
from starlette.exceptions import HTTPException as StarletteHTTPException
from . import connection, config, booking
from api.errors import ALLOWED_METHODS, booking_error_handler, starlette_error_handler
from models.errors import BookingError

logging.basicConfig(level=logging.INFO)

app = fastapi.FastAPI()

app.add_exception_handler(BookingError, booking_error_handler)
app.add_exception_handler(StarletteHTTPException, starlette_error_handler)

ALLOWED_METHODS[config.PATH] = config.ALLOW
ALLOWED_METHODS[booking.PATH] = booking.ALLOW

app.include_router(connection.router)
app.include_router(config.router)
app.include_router(booking.router)
