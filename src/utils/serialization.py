from datetime import date, datetime
from decimal import Decimal

def make_serializable(data):
    serializable_data = {}
    for k, v in data.items():
        if isinstance(v, (datetime, date)):
            serializable_data[k] = v.strftime("%Y-%m-%d")
        elif isinstance(v, Decimal):
            serializable_data[k] = str(v)
        else:
            serializable_data[k] = v
    return serializable_data
