from decimal import Decimal
from typing import Dict, FrozenSet, List, Optional, Union

from hexbytes import HexBytes

from core.client import Client
from core.dapps import Compound, Dex, Lending, UniswapV3
from core.decorators import pipeline_step
from core.exceptions import InvalidAmountError, InvalidStateTransitionError, StepFailedError
from logger import logger
from models.pipeline import PipelineConfig, PipelineResult, PipelineState, StepRecord
from models.swap import SwapResult

_TRANSITIONS: Dict[PipelineState, FrozenSet[PipelineState]] = {
    PipelineState.IDLE: frozenset({PipelineState.APPROVING, PipelineState.FAILED}),
    PipelineState.APPROVING: frozenset({PipelineState.SWAPPING, PipelineState.FAILED}),
    PipelineState.SWAPPING: frozenset({PipelineState.APPROVING_SUPPLY, PipelineState.FAILED}),
    PipelineState.APPROVING_SUPPLY: frozenset({PipelineState.SUPPLYING, PipelineState.FAILED}),
    PipelineState.SUPPLYING: frozenset({PipelineState.DONE, PipelineState.FAILED}),
    PipelineState.DONE: frozenset(),
    PipelineState.FAILED: frozenset(),
}

STEP_APPROVE_SWAP = "approve-swap"
STEP_SWAP = "swap"
STEP_APPROVE_SUPPLY = "approve-supply"
STEP_SUPPLY = "supply"


class SwapAndSupplyPipeline:
    """
    Approves `token_in` for the router, swaps it for `token_out`, approves
    `token_out` for the lending market and deposits the swap output there.

    Each instance runs once. The amount supplied is the amount the swap
    actually delivered, read from the swap receipt. Nothing is rolled back
    on failure: allowances granted by earlier steps stay in place.
    """

    def __init__(
        self,
        client: Client,
        config: PipelineConfig,
        dex: Optional[Dex] = None,
        lending: Optional[Lending] = None,
    ) -> None:
        self.client = client
        self.config = config
        self.dex: Dex = dex or UniswapV3(
            client=client, factory_address=config.factory_address, router_address=config.router_address
        )
        self.lending: Lending = lending or Compound(
            client=client,
            ctoken_address=config.lending_address,
            post_approve_delay_range=config.post_approve_delay_range,
        )
        self.state = PipelineState.IDLE
        self.steps: List[StepRecord] = []

    def _transition(self, target: PipelineState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidStateTransitionError(current=self.state, target=target)
        logger.debug(f"[Pipeline] {self.state.value} -> {target.value}")
        self.state = target

    def _record(self, name: str, tx_hash: HexBytes) -> None:
        self.steps.append(StepRecord(name=name, tx_hash=tx_hash))

    @pipeline_step(PipelineState.APPROVING)
    async def _approve_swap(self, amount_in: int) -> None:
        tx_hash = await self.client.approve(
            spender=self.dex.spender,
            token=self.config.token_in,
            value=amount_in,
            post_approve_delay_range=self.config.post_approve_delay_range,
            label="Pipeline",
        )
        self._record(STEP_APPROVE_SWAP, tx_hash)

    @pipeline_step(PipelineState.SWAPPING)
    async def _swap(self, amount_in: int) -> SwapResult:
        pool_info = await self.dex.get_pool_info(
            token_in=self.config.token_in, token_out=self.config.token_out, fee=self.config.fee_tier
        )
        params = self.dex.prepare_swap_params(
            pool_info=pool_info,
            token_in=self.config.token_in,
            token_out=self.config.token_out,
            amount_in=amount_in,
            deadline_seconds=self.config.deadline_seconds,
            amount_out_minimum=self.config.amount_out_minimum,
            sqrt_price_limit_x96=self.config.sqrt_price_limit_x96,
        )
        result = await self.dex.swap(params)
        self._record(STEP_SWAP, result.tx_hash)
        return result

    @pipeline_step(PipelineState.APPROVING_SUPPLY)
    async def _approve_supply(self, amount_out: int) -> None:
        tx_hash = await self.lending.approve(token=self.config.token_out, value=amount_out)
        self._record(STEP_APPROVE_SUPPLY, tx_hash)

    @pipeline_step(PipelineState.SUPPLYING)
    async def _supply(self, amount_out: int) -> None:
        tx_hash = await self.lending.mint(token=self.config.token_out, value=amount_out)
        self._record(STEP_SUPPLY, tx_hash)

    async def run(self, amount: Union[int, float, str, Decimal]) -> PipelineResult:
        """
        Runs all four steps for `amount` of `token_in`, given in human units.

        Raises StepFailedError (with the original error as `cause`) as soon as
        a step fails; the pipeline is left in FAILED.
        """
        if self.state is not PipelineState.IDLE:
            raise InvalidStateTransitionError(current=self.state, target=PipelineState.APPROVING)

        token_in, token_out = self.config.token_in, self.config.token_out
        try:
            amount_in = token_in.to_wei(amount)
            if amount_in <= 0:
                raise InvalidAmountError(f"Swap amount must be positive, got {amount} {token_in.symbol}")
        except InvalidAmountError as error:
            self._transition(PipelineState.FAILED)
            logger.error(f"[Pipeline] {error}")
            raise StepFailedError(step=PipelineState.IDLE.value, cause=error) from error

        logger.info(f"[Pipeline] Swapping {amount} {token_in.symbol} to {token_out.symbol} and supplying the output")

        await self._approve_swap(amount_in)
        swap_result = await self._swap(amount_in)
        await self._approve_supply(swap_result.amount_out)
        await self._supply(swap_result.amount_out)
        self._transition(PipelineState.DONE)

        logger.success(
            f"[Pipeline] Supplied {token_out.from_wei(swap_result.amount_out)} {token_out.symbol} "
            f"bought with {amount} {token_in.symbol}"
        )
        for step in self.steps:
            logger.success(f"[Pipeline] {step.name}: {self.client.tx_url(step.tx_hash)}")

        return PipelineResult(
            state=self.state,
            amount_in=amount_in,
            amount_out=swap_result.amount_out,
            steps=list(self.steps),
        )
