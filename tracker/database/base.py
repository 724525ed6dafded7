from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Largest primary key a signed 64-bit INTEGER column can hold.
MAX_ID = 2 ** 63 - 1
