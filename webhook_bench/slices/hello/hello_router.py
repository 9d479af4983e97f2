from fastapi import APIRouter
from typing import Dict

from webhook_bench.const import HELLO_MESSAGE, HELLO_ROUTE


class HelloRouter:
    """Router for the local hello-world route used as a benchmark target."""

    def __init__(self):
        self.router = APIRouter(tags=["hello"])
        self.router.get(HELLO_ROUTE, response_model=Dict[str, str])(self.hello)

    @classmethod
    def get_router(cls) -> APIRouter:
        """Get the router instance."""
        return cls().router

    async def hello(self) -> Dict[str, str]:
        return {"message": HELLO_MESSAGE}
