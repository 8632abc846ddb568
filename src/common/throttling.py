from ninja_extra.throttling import AnonRateThrottle


class AnonDefaultThrottle(AnonRateThrottle):
    rate = "60/min"


class ReservationThrottle(AnonRateThrottle):
    rate = "30/min"


class WaitingListThrottle(AnonRateThrottle):
    rate = "10/min"
