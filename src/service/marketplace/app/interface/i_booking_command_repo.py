from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def reserve(self, *, booking: Booking) -> tuple[Booking, int]:
        """
        Atomically decrement the ticket's quantity_remaining by booking.quantity
        and insert the booking, or do neither.

        Returns:
            (stored booking with total_amount priced from the ticket, quantity_remaining after)

        Raises:
            NotFoundError: ticket does not exist
            SoldOutError: quantity_remaining is 0
            InsufficientInventoryError: quantity_remaining < booking.quantity
        """
        pass
