"""AWS Lambda entry point for API Gateway proxy integration."""

from mangum import Mangum

from .main import app

handler = Mangum(app, lifespan="off")
