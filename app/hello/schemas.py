from pydantic import BaseModel, Field

class HelloResponse(BaseModel):
    """Greeting returned for an accepted name"""
    message: str = Field(..., description="'Hello ' followed by the trimmed name")

class ErrorResponse(BaseModel):
    """Error body shared by every rejected request"""
    error: str = Field(..., description="Fixed error message")
