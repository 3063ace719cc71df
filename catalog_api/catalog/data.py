"""
Built-in product catalog definition.

Loaded once at startup unless ``PRODUCTS_FILE`` points at a JSON file.
Prices are in INR.
"""

PRODUCTS = [
    {
        "id": "p1",
        "name": "Lenovo Ideapad 3",
        "category": "laptop",
        "price": 52000,
        "tags": ["coding", "budget", "student"],
    },
    {
        "id": "p2",
        "name": "HP Pavilion 14",
        "category": "laptop",
        "price": 58000,
        "tags": ["office", "student", "lightweight"],
    },
    {
        "id": "p3",
        "name": "Apple MacBook Air M2",
        "category": "laptop",
        "price": 99900,
        "tags": ["coding", "lightweight", "battery"],
    },
    {
        "id": "p4",
        "name": "Dell Inspiron 15",
        "category": "laptop",
        "price": 47000,
        "tags": ["budget", "office"],
    },
    {
        "id": "p5",
        "name": "ASUS TUF Gaming F15",
        "category": "laptop",
        "price": 75000,
        "tags": ["gaming", "coding", "high-refresh"],
    },
    {
        "id": "p6",
        "name": "Razer Blade 15",
        "category": "laptop",
        "price": 180000,
        "tags": ["gaming", "high-refresh", "powerful"],
    },
    {
        "id": "p7",
        "name": "Samsung Galaxy S23",
        "category": "phone",
        "price": 74999,
        "tags": ["camera", "android", "flagship"],
    },
    {
        "id": "p8",
        "name": "Google Pixel 7a",
        "category": "phone",
        "price": 43999,
        "tags": ["camera", "android", "budget"],
    },
    {
        "id": "p9",
        "name": "Apple iPhone 15",
        "category": "phone",
        "price": 79900,
        "tags": ["camera", "ios", "flagship"],
    },
    {
        "id": "p10",
        "name": "Redmi Note 13",
        "category": "phone",
        "price": 17999,
        "tags": ["budget", "android", "battery"],
    },
    {
        "id": "p11",
        "name": "Sony WH-1000XM5",
        "category": "audio",
        "price": 29990,
        "tags": ["noise-cancelling", "wireless", "travel"],
    },
    {
        "id": "p12",
        "name": "boAt Airdopes 141",
        "category": "audio",
        "price": 1299,
        "tags": ["wireless", "budget", "earbuds"],
    },
    {
        "id": "p13",
        "name": "JBL Flip 6",
        "category": "audio",
        "price": 11999,
        "tags": ["speaker", "wireless", "waterproof"],
    },
    {
        "id": "p14",
        "name": "Logitech MX Master 3S",
        "category": "accessory",
        "price": 9995,
        "tags": ["mouse", "wireless", "productivity"],
    },
    {
        "id": "p15",
        "name": "Keychron K2 Mechanical Keyboard",
        "category": "accessory",
        "price": 8499,
        "tags": ["keyboard", "coding", "wireless"],
    },
    {
        "id": "p16",
        "name": "Dell UltraSharp U2723QE",
        "category": "monitor",
        "price": 58999,
        "tags": ["4k", "usb-c", "productivity"],
    },
    {
        "id": "p17",
        "name": "LG UltraGear 27GP850",
        "category": "monitor",
        "price": 36999,
        "tags": ["gaming", "high-refresh", "1440p"],
    },
    {
        "id": "p18",
        "name": "Samsung Galaxy Tab S9",
        "category": "tablet",
        "price": 72999,
        "tags": ["android", "stylus", "student"],
    },
    {
        "id": "p19",
        "name": "Apple iPad 10th Gen",
        "category": "tablet",
        "price": 39900,
        "tags": ["ios", "student", "media"],
    },
    {
        "id": "p20",
        "name": "Amazon Kindle Paperwhite",
        "category": "tablet",
        "price": 14999,
        "tags": ["reading", "waterproof", "battery"],
    },
    {
        "id": "p21",
        "name": "Anker PowerCore 20000",
        "category": "accessory",
        "price": 3999,
        "tags": ["battery", "travel", "charging"],
    },
    {
        "id": "p22",
        "name": "SanDisk Extreme Portable SSD 1TB",
        "category": "accessory",
        "price": 8999,
        "tags": ["storage", "usb-c", "travel"],
    },
]
