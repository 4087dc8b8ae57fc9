from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    phone_number: str

    def __str__(self) -> str:
        return f"Customer{{id: {self.id}, name: {self.name}, phone: {self.phone_number}}}"
