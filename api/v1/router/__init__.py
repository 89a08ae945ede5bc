from .health import router as health
from .contact import router as contact
from .quote import router as quote
from .upload import router as upload, uploads_router
