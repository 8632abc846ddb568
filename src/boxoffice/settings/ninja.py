from decouple import config

NINJA_EXTRA = {
    "THROTTLE_RATES": {
        "user": config("THROTTLE_RATE_USER", default="1000/day"),
        "anon": config("THROTTLE_RATE_ANON", default="250/day"),
    },
    "NUM_PROXIES": None,
}
