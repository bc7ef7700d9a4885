from typing import Literal


existing_endpoints = Literal["bigquery"]
