from eth_utils import ValidationError


class BaseExitError(Exception):
    """
    The base class for all triggerable exit errors.
    """
    pass


class AdmissionError(BaseExitError):
    """
    Raised when an admission call is rejected. The call has no persisted effect.
    """
    pass


class InsufficientPayment(AdmissionError):
    """
    Raised when the value attached to an admission call is below the current fee.
    """
    def __init__(self, payment: int, fee: int) -> None:
        super().__init__(f"Payment of {payment} is below the current exit fee of {fee}")
        self.payment = payment
        self.fee = fee


class RefundTransferFailed(AdmissionError):
    """
    Raised when the overpayment could not be returned to the caller within the
    fixed gas stipend.
    """
    pass


class InvalidCallData(AdmissionError):
    """
    Raised when the call input is neither a 48 byte validator pubkey nor an
    empty fee query.
    """
    pass


class BlockPhaseError(BaseExitError):
    """
    Raised when block processing steps are invoked out of order, e.g. finalizing
    a block that has not been validated.
    """
    pass


class InvalidExitBlock(ValidationError):
    """
    Raised when a block's exit operations disagree with the exit queue. The whole
    block must be rejected.
    """
    pass


class BlockCommitmentMismatch(InvalidExitBlock):
    """
    Raised when the header's exits root does not match the root of the expected
    dequeue batch. The root is compared against the batch the queue mandates, not
    against the block body, so a body whose root matches the header but whose exits
    are wrong is reported here rather than as a :class:`BlockContentMismatch`.
    """
    pass


class BlockContentMismatch(InvalidExitBlock):
    """
    Raised when the block body's exit list differs from the expected dequeue batch
    in length, order or content.
    """
    pass


class ExitOperationRejected(ValidationError):
    """
    Raised by a consumer of finalized exits when a single exit cannot be actioned,
    e.g. the validator has already exited.
    """
    pass
