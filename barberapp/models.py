# barberapp/models.py

from sqlmodel import SQLModel, Field

class Service(SQLModel, table=True):
    id: str = Field(primary_key=True)
    name: str
    description: str
    duration: int  # minutes
    price: float  # reference currency (BRL)
    category: str = Field(index=True)
    active: bool = True
    # higher position lists first (most-recent-first)
    position: int = Field(default=0, index=True)

class Appointment(SQLModel, table=True):
    id: str = Field(primary_key=True)
    client_name: str
    client_phone: str
    client_email: str
    service_name: str
    date: str  # stored as received, parsed on read
    status: str = "Pending"
