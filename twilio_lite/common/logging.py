from aws_lambda_powertools import Logger

from .config import settings

# Structured JSON logger; records are plain dicts.
logger = Logger(service=settings.service_name, level=settings.log_level)
