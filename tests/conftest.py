import pytest


def make_item(sku, quantity, sale_price, discount=0):
    return {"sku": sku, "quantity": quantity, "sale_price": sale_price, "discount": discount}


@pytest.fixture
def sample_dataset():
    """
    Three sellers, three products, four receipts (one of them empty).

    Expected totals with the default strategies:
      seller_2: revenue 110, profit 40, 1 sale
      seller_1: revenue 40,  profit 20, 2 sales (one empty receipt)
      seller_3: revenue 15,  profit 0,  1 sale
    """
    return {
        "sellers": [
            {"id": "seller_1", "first_name": "Ivan", "last_name": "Petrov"},
            {"id": "seller_2", "first_name": "Anna", "last_name": "Smirnova"},
            {"id": "seller_3", "first_name": "Oleg", "last_name": "Ivanov"},
        ],
        "products": [
            {"sku": "SKU_001", "name": "Kettle", "purchase_price": 10},
            {"sku": "SKU_002", "name": "Toaster", "purchase_price": 50},
            {"sku": "SKU_003", "name": "Mug", "purchase_price": 5},
        ],
        "customers": [
            {"id": "customer_1", "first_name": "Maria", "last_name": "Orlova"},
        ],
        "purchase_records": [
            {
                "receipt_id": "r1",
                "seller_id": "seller_1",
                "customer_id": "customer_1",
                "items": [make_item("SKU_001", 2, 20)],
            },
            {
                "receipt_id": "r2",
                "seller_id": "seller_2",
                "customer_id": "customer_1",
                "items": [make_item("SKU_002", 1, 100, 10), make_item("SKU_003", 4, 10, 50)],
            },
            {
                "receipt_id": "r3",
                "seller_id": "seller_1",
                "customer_id": "customer_1",
                "items": [],
            },
            {
                "receipt_id": "r4",
                "seller_id": "seller_3",
                "customer_id": "customer_1",
                "items": [make_item("SKU_003", 3, 5)],
            },
        ],
    }


@pytest.fixture
def five_seller_dataset():
    """Five sellers selling one zero-cost product, profits 300/500/100/400/200 in input order."""
    prices = [300, 500, 100, 400, 200]
    return {
        "sellers": [
            {"id": f"s{i}", "first_name": f"First{i}", "last_name": f"Last{i}"}
            for i in range(len(prices))
        ],
        "products": [{"sku": "P", "purchase_price": 0}],
        "customers": [],
        "purchase_records": [
            {"seller_id": f"s{i}", "items": [make_item("P", 1, price)]}
            for i, price in enumerate(prices)
        ],
    }
