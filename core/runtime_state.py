from threading import Lock


class RuntimeState:
    def __init__(self):
        self.lock = Lock()
        self.slots = []
        self.next_prayer = None
        self.hijri_date = ""
        self.gregorian_date = ""
        self.location_name = ""
        self.remaining_template = "{hours}h {minutes}m"
        self.last_refresh = None
        self.last_error = None

    def set_day(self, daily, location_name: str = ""):
        with self.lock:
            self.slots = list(daily.slots)
            self.hijri_date = daily.hijri_date
            self.gregorian_date = daily.gregorian_date
            self.last_refresh = daily.fetched_at
            self.last_error = None
            if location_name:
                self.location_name = location_name

    def snapshot(self) -> dict:
        with self.lock:
            return {
                "slots": list(self.slots),
                "next_prayer": self.next_prayer,
                "hijri_date": self.hijri_date,
                "gregorian_date": self.gregorian_date,
                "location_name": self.location_name,
                "remaining_template": self.remaining_template,
                "last_refresh": self.last_refresh,
                "last_error": self.last_error,
            }


state = RuntimeState()
