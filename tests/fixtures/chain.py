import pytest
from eth_account import Account
from eth_account.signers.local import LocalAccount

from byzop import ByzOperatorClient
from byzop.testing import FakeWeb3

TEST_PRIVATE_KEY = "0x" + "11" * 32
"""Deterministic, throwaway key so signed transactions are reproducible"""

CHAIN_ID = 17000

NETWORK_ADDRESS = "0x0000000000000000000000000000000000000123"
VAULT_ADDRESS = "0x0000000000000000000000000000000000000456"
OPERATOR_INDEX = "0x" + "ab" * 32


@pytest.fixture()
def account() -> LocalAccount:
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture()
def fake_w3() -> FakeWeb3:
    return FakeWeb3()


@pytest.fixture()
def client(fake_w3: FakeWeb3, account: LocalAccount) -> ByzOperatorClient:
    return ByzOperatorClient(fake_w3, CHAIN_ID, account=account)


@pytest.fixture()
def read_only_client(fake_w3: FakeWeb3) -> ByzOperatorClient:
    return ByzOperatorClient(fake_w3, CHAIN_ID)
