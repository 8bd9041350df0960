from pydantic import BaseModel, Field

# ---------- Inputs ----------

class SignUpIn(BaseModel):
    email: str = Field(default="", max_length=255, examples=["user@example.com"])
    password: str = Field(min_length=1, max_length=128)
    user_role: str = Field(default="USER", examples=["USER", "ADMIN"])

class SignInIn(BaseModel):
    email: str = Field(examples=["user@example.com"])
    password: str


# ---------- Outputs ----------

class TokenOut(BaseModel):
    bearer_token: str   # "Bearer <jwt>", prêt à être posé dans l'en-tête Authorization
    token: str          # jwt brut
    token_type: str = "bearer"
