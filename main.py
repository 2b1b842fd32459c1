from fastapi import FastAPI
from api.toll_routes import router as toll_router
from modules.logger import general_logger


general_logger.info("Starting toll fee API...")
app = FastAPI(title="Road Toll Fee API")

app.include_router(toll_router, prefix="/toll", tags=["Toll"])

@app.get("/")
def root():
    return {"message": "Toll fee API is running"}
