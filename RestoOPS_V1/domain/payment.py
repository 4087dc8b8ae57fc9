from dataclasses import dataclass, field
from datetime import datetime

from RestoOPS_V1.core.errors import InsufficientPaymentError
from RestoOPS_V1.domain.types import PaymentMethod


@dataclass
class Payment:
    """
    Règlement d'une commande.
    - change : monnaie à rendre, calculée par process_payment
    - is_processed : True seulement si le montant couvre le total
    """

    payment_id: str
    order_id: str
    amount: float
    payment_method: PaymentMethod
    payment_date: datetime = field(default_factory=datetime.now)
    change: float = field(default=0.0, init=False)
    is_processed: bool = field(default=False, init=False)

    def process_payment(self, total_amount: float) -> None:
        """Settle against `total_amount`.

        Raises:
            InsufficientPaymentError: If the tendered amount is below the total;
                the payment then stays unprocessed.
        """
        # NaN compares False both ways: only a real amount >= total settles
        if not self.amount >= total_amount:
            raise InsufficientPaymentError(required=total_amount, provided=self.amount)
        self.change = self.amount - total_amount
        self.is_processed = True

    @property
    def collected(self) -> float:
        """Net amount kept by the house (tendered minus change)."""
        return self.amount - self.change if self.is_processed else 0.0

    def __str__(self) -> str:
        return (
            f"Payment{{paymentId: {self.payment_id}, orderId: {self.order_id}, "
            f"amount: {self.amount:.2f}, paymentDate: {self.payment_date:%Y-%m-%d %H:%M}, "
            f"paymentMethod: {self.payment_method.value}, change: {self.change:.2f}, "
            f"isProcessed: {self.is_processed}}}"
        )
