from fastapi import APIRouter
from bigram_tfidf.api.api_v1 import tfidf


api_router = APIRouter()

api_router.include_router(tfidf.router, prefix="", tags=["tfidf"])
