"""
api/usdm 래퍼 테스트 (USD-M 선물, fapi.binance.com)
"""

import json
from unittest.mock import AsyncMock

import pytest

from binance_sdk.api.usdm import UsdMFutures
from binance_sdk.core.config.loader import ClientConfig
from binance_sdk.core.errors import ParameterRequiredError
from binance_sdk.core.types import (
    ContractType,
    FuturePeriod,
    KlineInterval,
    MarginType,
    OrderSide,
    OrderType,
    PositionSide,
    TimeInForce,
)


@pytest.fixture
def usdm(client_config: ClientConfig, mock_http_client: AsyncMock) -> UsdMFutures:
    return UsdMFutures(client_config, mock_http_client)


class TestUsdMFuturesClient:
    """UsdMFutures 파사드 테스트"""

    def test_groups(self, usdm: UsdMFutures) -> None:
        for group in (usdm.market, usdm.trade, usdm.data_stream, usdm.portfolio_margin):
            assert group.dispatcher is usdm.dispatcher

    @pytest.mark.asyncio
    async def test_host(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.ping()

        request = last_request()
        assert request.host == "https://fapi.binance.com"
        assert request.path == "/fapi/v1/ping"

    @pytest.mark.asyncio
    async def test_testnet_host(self, mock_http_client: AsyncMock, last_request) -> None:
        usdm = UsdMFutures(ClientConfig.testnet(), mock_http_client)
        await usdm.market.time()

        assert last_request().host == "https://testnet.binancefuture.com"


class TestUsdMMarketApi:
    """USD-M 시세 API 테스트"""

    @pytest.mark.asyncio
    async def test_depth_keeps_symbol_case(self, usdm: UsdMFutures, last_request) -> None:
        """선물 래퍼는 심볼을 변환하지 않음"""
        await usdm.market.depth("btcusdt", limit=10)
        assert last_request().query == "symbol=btcusdt&limit=10"

    @pytest.mark.asyncio
    async def test_historical_trades_signed(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.historical_trades("BTCUSDT")

        request = last_request()
        assert request.path == "/fapi/v1/historicalTrades"
        assert "signature" in request.params

    @pytest.mark.asyncio
    async def test_continuous_klines(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.continuous_klines("BTCUSDT", "PERPETUAL", "1m")

        request = last_request()
        assert request.path == "/fapi/v1/continuousKlines"
        assert request.query == "pair=BTCUSDT&contractType=PERPETUAL&interval=1m"

    @pytest.mark.asyncio
    async def test_continuous_klines_enums(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.continuous_klines(
            "BTCUSDT", ContractType.CURRENT_QUARTER, KlineInterval.FIVE_MINUTES
        )

        request = last_request()
        assert request.query == "pair=BTCUSDT&contractType=CURRENT_QUARTER&interval=5m"

    @pytest.mark.asyncio
    async def test_mark_price_klines_uses_symbol(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.mark_price_klines("BTCUSDT", "1h")

        request = last_request()
        assert request.path == "/fapi/v1/markPriceKlines"
        assert request.query == "symbol=BTCUSDT&interval=1h"

    @pytest.mark.asyncio
    async def test_blvt_klines_interval(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.blvt_klines("BTCDOWN", "1h")

        request = last_request()
        assert request.path == "/fapi/v1/lvtKlines"
        assert request.query == "symbol=BTCDOWN&interval=1h"

    @pytest.mark.asyncio
    async def test_mark_price_all(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.market.mark_price()

        request = last_request()
        assert request.path == "/fapi/v1/premiumIndex"
        assert request.query == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method_name", "path"),
        [
            ("open_interest_hist", "/futures/data/openInterestHist"),
            ("top_long_short_account_ratio", "/futures/data/topLongShortAccountRatio"),
            ("top_long_short_position_ratio", "/futures/data/topLongShortPositionRatio"),
            ("long_short_ratio", "/futures/data/globalLongShortAccountRatio"),
            ("taker_long_short_ratio", "/futures/data/takerlongshortRatio"),
        ],
    )
    async def test_period_statistics(
        self, usdm: UsdMFutures, last_request, method_name: str, path: str
    ) -> None:
        """/futures/data 통계는 선물 호스트의 공개 엔드포인트"""
        await getattr(usdm.market, method_name)("BTCUSDT", FuturePeriod.FIVE_MINUTES, limit=30)

        request = last_request()
        assert request.host == "https://fapi.binance.com"
        assert request.path == path
        assert request.query == "symbol=BTCUSDT&period=5m&limit=30"

    @pytest.mark.asyncio
    async def test_period_statistics_missing(self, usdm: UsdMFutures) -> None:
        with pytest.raises(ParameterRequiredError) as exc_info:
            await usdm.market.open_interest_hist("BTCUSDT", "")

        assert exc_info.value.names == ["period"]


class TestUsdMTradeApi:
    """USD-M 주문/계정 API 테스트"""

    @pytest.mark.asyncio
    async def test_new_order(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.new_order("BTCUSDT", "SELL", "MARKET", quantity=0.01, reduceOnly=True)

        request = last_request()
        assert request.method == "POST"
        assert request.path == "/fapi/v1/order"
        assert request.query.startswith(
            "symbol=BTCUSDT&side=SELL&type=MARKET&quantity=0.01&reduceOnly=true&timestamp="
        )

    @pytest.mark.asyncio
    async def test_new_order_enums(self, usdm: UsdMFutures, last_request) -> None:
        """주문 관련 enum은 값으로 직렬화"""
        await usdm.trade.new_order(
            "BTCUSDT",
            OrderSide.BUY,
            OrderType.LIMIT,
            positionSide=PositionSide.LONG,
            timeInForce=TimeInForce.GTX,
            quantity=0.00001,
            price=30000,
        )

        request = last_request()
        assert request.query.startswith(
            "symbol=BTCUSDT&side=BUY&type=LIMIT&positionSide=LONG&timeInForce=GTX"
            "&quantity=0.00001&price=30000&timestamp="
        )

    @pytest.mark.asyncio
    async def test_change_margin_type_enum(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.change_margin_type("BTCUSDT", MarginType.ISOLATED)

        request = last_request()
        assert request.method == "POST"
        assert request.path == "/fapi/v1/marginType"
        assert request.query.startswith("symbol=BTCUSDT&marginType=ISOLATED&timestamp=")

    @pytest.mark.asyncio
    async def test_change_position_mode_bool(self, usdm: UsdMFutures, last_request) -> None:
        """False도 유효한 값으로 전송"""
        await usdm.trade.change_position_mode(False)

        request = last_request()
        assert request.path == "/fapi/v1/positionSide/dual"
        assert request.params["dualSidePosition"] == "false"

    @pytest.mark.asyncio
    async def test_new_batch_orders_encoded(self, usdm: UsdMFutures, last_request) -> None:
        """batchOrders는 JSON 문자열 하나로 인코딩"""
        orders = [
            {"symbol": "BTCUSDT", "side": "BUY", "type": "LIMIT", "quantity": "0.001",
             "price": "20000", "timeInForce": "GTC"},
            {"symbol": "ETHUSDT", "side": "SELL", "type": "MARKET", "quantity": "0.1"},
        ]
        await usdm.trade.new_batch_orders(orders)

        request = last_request()
        assert request.path == "/fapi/v1/batchOrders"
        assert request.query.count("batchOrders=") == 1
        assert json.loads(request.params["batchOrders"]) == orders
        assert " " not in request.params["batchOrders"]

    @pytest.mark.asyncio
    async def test_new_batch_orders_empty(
        self, usdm: UsdMFutures, mock_http_client: AsyncMock
    ) -> None:
        with pytest.raises(ParameterRequiredError):
            await usdm.trade.new_batch_orders([])

        mock_http_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancel_open_orders(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.cancel_open_orders("BTCUSDT")

        request = last_request()
        assert request.method == "DELETE"
        assert request.path == "/fapi/v1/allOpenOrders"

    @pytest.mark.asyncio
    async def test_balance_v2(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.balance()
        assert last_request().path == "/fapi/v2/balance"

    @pytest.mark.asyncio
    async def test_position_risk_v2(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.position_risk("BTCUSDT")

        request = last_request()
        assert request.path == "/fapi/v2/positionRisk"
        assert request.params["symbol"] == "BTCUSDT"

    @pytest.mark.asyncio
    async def test_change_leverage(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.change_leverage("BTCUSDT", 20)

        request = last_request()
        assert request.method == "POST"
        assert request.query.startswith("symbol=BTCUSDT&leverage=20&timestamp=")

    @pytest.mark.asyncio
    async def test_modify_isolated_position_margin(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.modify_isolated_position_margin("BTCUSDT", "10.5", 1)

        request = last_request()
        assert request.path == "/fapi/v1/positionMargin"
        assert request.query.startswith("symbol=BTCUSDT&amount=10.5&type=1&")

    @pytest.mark.asyncio
    async def test_download_link(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.trade.download_link("abc")

        request = last_request()
        assert request.path == "/fapi/v1/income/asyn/id"
        assert request.params["downloadId"] == "abc"


class TestUsdMDataStreamApi:
    """USD-M listen key 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method_name", "http_method"),
        [("new_listen_key", "POST"), ("renew_listen_key", "PUT"), ("close_listen_key", "DELETE")],
    )
    async def test_listen_key(
        self, usdm: UsdMFutures, last_request, method_name: str, http_method: str
    ) -> None:
        await getattr(usdm.data_stream, method_name)()

        request = last_request()
        assert request.method == http_method
        assert request.path == "/fapi/v1/listenKey"


class TestUsdMPortfolioMarginApi:
    """USD-M 포트폴리오 마진 테스트"""

    @pytest.mark.asyncio
    async def test_pm_exchange_info(self, usdm: UsdMFutures, last_request) -> None:
        await usdm.portfolio_margin.pm_exchange_info(symbol="BTCUSDT")

        request = last_request()
        assert request.path == "/fapi/v1/pmExchangeInfo"
        assert request.params["symbol"] == "BTCUSDT"


class TestRequiredValidation:
    """빈 필수 인자는 I/O 전에 거부"""

    @pytest.mark.asyncio
    async def test_all_usdm_wrappers(
        self, usdm: UsdMFutures, mock_http_client: AsyncMock, required_wrappers
    ) -> None:
        wrappers = required_wrappers(usdm)

        for name, method, count in wrappers:
            with pytest.raises(ParameterRequiredError):
                await method(*([""] * count))

        assert len(wrappers) > 30
        mock_http_client.request.assert_not_awaited()
