import sys

from loguru import logger

from docgraph.api import create_app
from docgraph.config import settings
from docgraph.layout import DocumentGraphBuilder

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info("Initializing document relation graph service")
builder = DocumentGraphBuilder()
app = create_app(builder=builder)
