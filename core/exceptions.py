from typing import Optional


class PipelineError(Exception):
    pass


class NoRPCEndpointSpecifiedError(PipelineError):
    def __init__(self, chain) -> None:
        super().__init__(f"No RPC endpoint specified for {chain.name}. Set `RPC_URL` in your .env file")
        self.chain = chain


class TransactionSendError(PipelineError):
    """Transaction couldn't be estimated, signed or broadcast."""


class TransactionRevertedError(PipelineError):
    def __init__(self, tx_hash: str, url: Optional[str] = None) -> None:
        super().__init__(f"Transaction reverted: {url or tx_hash}")
        self.tx_hash = tx_hash
        self.url = url


class PreconditionError(PipelineError):
    pass


class PoolNotFoundError(PreconditionError):
    def __init__(self, token_a: str, token_b: str, fee: int) -> None:
        super().__init__(f"No pool found for {token_a}/{token_b} with fee tier {fee}")
        self.fee = fee


class InvalidAmountError(PreconditionError):
    pass


class SwapOutputNotFoundError(PreconditionError):
    pass


class NothingToWithdrawError(PreconditionError):
    pass


class SupplyNotConfirmedError(PreconditionError):
    """Mint transaction succeeded but the cToken balance didn't grow."""


class InvalidStateTransitionError(PipelineError):
    def __init__(self, current, target) -> None:
        super().__init__(f"Can't move pipeline from {current.name} to {target.name}")
        self.current = current
        self.target = target


class StepFailedError(PipelineError):
    def __init__(self, step: str, cause: BaseException) -> None:
        super().__init__(f"Step `{step}` failed: {cause}")
        self.step = step
        self.cause = cause
