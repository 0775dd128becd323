from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Allocation rule, applied to quantity × price per row
    ALLOCATION_RATE: float = 0.07
    QUANTITY_COLUMN: str = "quantity"
    PRICE_COLUMN: str = "price"

    # Sample table (Table.sample)
    SAMPLE_ROWS: int = 10000
    SAMPLE_QUANTITY: float = 100.0
    SAMPLE_PRICE: float = 1.0

    # Raise instead of truncating when zipped columns differ in length
    STRICT_COLUMN_LENGTHS: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
