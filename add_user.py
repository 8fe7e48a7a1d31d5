"""Seed a demo account: demo@example.com / password."""
from taskboard.database import create_tables, get_session
from taskboard.models import User
from taskboard.routers.auth import get_password_hash

EMAIL = "demo@example.com"
PASSWORD = "password"

create_tables()

with get_session() as db:
    if db.query(User).filter(User.email == EMAIL).first():
        print("User already exists")
    else:
        db.add(User(name="Demo User", email=EMAIL, hashed_password=get_password_hash(PASSWORD)))
        db.commit()
        print(f"Demo user created: {EMAIL} / {PASSWORD}")
