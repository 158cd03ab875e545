"""Fixed paths, status tables and placeholder datasets."""

# Database paths
USERS_PATH = "users"
DISHES_PATH = "dishes"
CATEGORIES_PATH = "categories"
BANNERS_PATH = "banners"
ORDERS_PATH = "orders"
DELIVERY_PARTNERS_PATH = "delivery_partners"
SETTINGS_PATH = "settings"

ALL_PINCODES = "ALL"

PLACEHOLDER_IMAGE_URL = "https://picsum.photos/150/110"
DEFAULT_DRIVER_IMAGE_URL = "https://cdn-icons-png.flaticon.com/512/4140/4140037.png"

DEFAULT_THEME_COLOR = "#673AB7"
DEFAULT_DELIVERY_FEE = 10.0
DEFAULT_FREE_DELIVERY_THRESHOLD = 0.0

# Backend order status -> status shown to the customer.
# Anything not listed here is shown as "Processing".
CUSTOMER_STATUS_MAP: dict[str, str] = {
    "Pending": "Order Placed",
    "Accepted": "Processing",
    "Preparing": "Processing",
    "Ready for Pickup": "Processing",
    "Picked Up": "On Way",
    "Out for Delivery": "On Way",
    "Delivered": "Delivered",
    "Cancelled": "Cancelled",
    "Rejected": "Cancelled",
}
DEFAULT_CUSTOMER_STATUS = "Processing"
ON_WAY_STATUS = "On Way"

SIMULATED_DRIVER: dict[str, str] = {
    "name": "Ravi Kumar",
    "mobile": "+91 98765 43210",
    "imageUrl": DEFAULT_DRIVER_IMAGE_URL,
}

PLACEHOLDER_CATEGORIES: list[dict] = [
    {"id": "cat-1", "name": "Biryani", "imageUrl": "https://picsum.photos/seed/biryani/80/80"},
    {"id": "cat-2", "name": "Pizza", "imageUrl": "https://picsum.photos/seed/pizza/80/80"},
    {"id": "cat-3", "name": "Burgers", "imageUrl": "https://picsum.photos/seed/burger/80/80"},
    {"id": "cat-4", "name": "Desserts", "imageUrl": "https://picsum.photos/seed/dessert/80/80"},
]

PLACEHOLDER_DISHES: list[dict] = [
    {
        "key": "dish-1",
        "name": "Chicken Biryani",
        "categoryId": "cat-1",
        "pincode": ALL_PINCODES,
        "price": {"final": 250.0, "restaurantPrice": 220.0, "adminFee": 30.0},
        "discount": 10,
        "unit": "1 Plate",
        "description": "Fragrant basmati rice layered with spiced chicken.",
        "isInStock": True,
        "imageUrl": "https://picsum.photos/seed/biryani-dish/150/110",
    },
    {
        "key": "dish-2",
        "name": "Margherita Pizza",
        "categoryId": "cat-2",
        "pincode": ALL_PINCODES,
        "price": {"final": 300.0, "restaurantPrice": 270.0, "adminFee": 30.0},
        "discount": 0,
        "unit": "8 inch",
        "description": "Tomato, mozzarella and basil on a thin crust.",
        "isInStock": True,
        "imageUrl": "https://picsum.photos/seed/pizza-dish/150/110",
    },
    {
        "key": "dish-3",
        "name": "Veg Burger",
        "categoryId": "cat-3",
        "pincode": ALL_PINCODES,
        "price": {"final": 120.0, "restaurantPrice": 105.0, "adminFee": 15.0},
        "discount": 5,
        "unit": "1 Piece",
        "description": "Crispy vegetable patty with lettuce and mayo.",
        "isInStock": True,
        "images": [
            "https://picsum.photos/seed/burger-1/150/110",
            "https://picsum.photos/seed/burger-2/150/110",
        ],
    },
    {
        "key": "dish-4",
        "name": "Gulab Jamun",
        "categoryId": "cat-4",
        "pincode": ALL_PINCODES,
        "price": {"final": 80.0, "restaurantPrice": 70.0, "adminFee": 10.0},
        "discount": 0,
        "unit": "2 Pieces",
        "description": "Milk dumplings soaked in rose syrup.",
        "isInStock": False,
        "imageUrl": "https://picsum.photos/seed/jamun/150/110",
    },
]

PLACEHOLDER_SLIDER_IMAGES: list[dict] = [
    {"downloadURL": "https://picsum.photos/seed/banner-1/600/250", "title": "Free delivery over 299"},
    {"downloadURL": "https://picsum.photos/seed/banner-2/600/250", "title": "Weekend biryani fest"},
    {"downloadURL": "https://picsum.photos/seed/banner-3/600/250", "title": "New: desserts"},
]
