from models.room import Room
from models.booking import BookingResult, BookingRecord, InsufficientAvailability
