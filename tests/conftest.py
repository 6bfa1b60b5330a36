"""
Shared test fixtures for the validation adapter test suite.
"""
import dataclasses
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Annotated, List, Optional

import pytest
from pydantic import BaseModel, BeforeValidator, Field, Json, RootModel, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from src.record_validation.messages import message_field


# ==========================================================================
# Record types
# ==========================================================================

class Address(BaseModel):
    city: str = message_field("city is required", min_length=1)
    zip_code: str = Field(min_length=5, max_length=5)


class User(BaseModel):
    name: str = message_field("name is required", min_length=1)
    age: int = Field(ge=0)
    email: str = Field(min_length=3)


class PlainUser(BaseModel):
    name: str = Field(min_length=1)


class Customer(BaseModel):
    name: str = Field(min_length=1)
    address: Address
    billing: Optional[Address] = None


class LabelledCustomer(BaseModel):
    address: Address = message_field("address is invalid")


class LineItem(BaseModel):
    sku: str = message_field("sku is required", min_length=1)
    quantity: int = Field(gt=0)


class Order(BaseModel):
    items: List[LineItem] = Field(min_length=1)


class Account(BaseModel):
    account_id: str = message_field("account id is required", alias="accountId", min_length=1)


class Tagged(BaseModel):
    name: str = message_field("name is required", validation_alias="n", min_length=1)


class Tags(RootModel[List[str]]):
    root: List[str] = message_field("at least one tag", min_length=1)


class Scores(RootModel[List[Annotated[int, Field(ge=0)]]]):
    pass


class Payload(BaseModel):
    data: Json[List[int]]


class Csv(BaseModel):
    tags: Annotated[List[str], BeforeValidator(lambda v: v.split(","))]


class DateRange(BaseModel):
    start: int
    end: int

    @model_validator(mode="after")
    def check_order(self):
        if self.end < self.start:
            raise ValueError("end before start")
        return self


@dataclass
class Signup:
    email: Annotated[str, Field(min_length=3)] = dataclasses.field(
        metadata={"errormessage": "email is too short"}
    )
    nickname: Annotated[str, Field(max_length=8)] = ""


@pydantic_dataclass
class Product:
    title: str = message_field("title is required", min_length=1)
    price: float = Field(gt=0)


class Opaque:
    """Arbitrary class the engine has no schema for."""


@dataclass
class Holder:
    payload: Opaque


# ==========================================================================
# Record fixtures
# ==========================================================================

@pytest.fixture
def records():
    """All record types above, for tests that build their own instances."""
    return SimpleNamespace(
        Address=Address,
        User=User,
        PlainUser=PlainUser,
        Customer=Customer,
        LabelledCustomer=LabelledCustomer,
        LineItem=LineItem,
        Order=Order,
        Account=Account,
        Tagged=Tagged,
        Tags=Tags,
        Scores=Scores,
        Payload=Payload,
        Csv=Csv,
        DateRange=DateRange,
        Signup=Signup,
        Product=Product,
        Opaque=Opaque,
        Holder=Holder,
    )


@pytest.fixture
def valid_user():
    return User(name="Mario Rossi", age=42, email="mario.rossi@example.it")


@pytest.fixture
def blank_name_user():
    # model_construct skips validation, like a struct literal
    return User.model_construct(name="", age=42, email="mario.rossi@example.it")


@pytest.fixture
def blank_name_plain_user():
    return PlainUser.model_construct(name="")


@pytest.fixture
def broken_user():
    return User.model_construct(name="", age=-1, email="m")


@pytest.fixture
def customer_with_blank_city():
    return Customer.model_construct(
        name="Ada",
        address=Address.model_construct(city="", zip_code="20121"),
    )


@pytest.fixture
def product_with_blank_title():
    product = Product(title="Lamp", price=19.9)
    product.title = ""  # no validate_assignment on pydantic dataclasses by default
    return product
