import pytest
from eth_account import Account

from byzop import ByzOperatorClient
from byzop.config import Config
from byzop.exceptions import ConfigError, SignerMissingError, UnsupportedChainError
from byzop.networks import NETWORKS
from byzop.testing import FakeWeb3

from .fixtures import CHAIN_ID, NETWORK_ADDRESS, OPERATOR_INDEX, TEST_PRIVATE_KEY, VAULT_ADDRESS


def test_unsupported_chain(fake_w3):
    with pytest.raises(UnsupportedChainError):
        ByzOperatorClient(fake_w3, 5)


@pytest.mark.parametrize("chain_id", list(NETWORKS.keys()))
def test_supported_chains(fake_w3, chain_id):
    client = ByzOperatorClient(fake_w3, chain_id)
    assert client.get_network_config() is NETWORKS[chain_id]
    assert client.sym_operator_registry.address == NETWORKS[chain_id].operator_registry
    assert client.native_registry.address == NETWORKS[chain_id].byz_operator_registry


def test_address(client, read_only_client, account):
    assert client.address == account.address
    assert read_only_client.address is None


def test_read_only_client_reads(read_only_client, fake_w3):
    """A client without an account can still read"""
    fake_w3.set_result("isEntity", False)
    assert read_only_client.is_operator(NETWORK_ADDRESS) is False


@pytest.mark.parametrize(
    "method,args",
    [
        ("register_operator", ()),
        ("opt_in_network", (NETWORK_ADDRESS,)),
        ("opt_out_vault", (VAULT_ADDRESS,)),
        ("unregister_native_operator", (OPERATOR_INDEX,)),
    ],
)
def test_read_only_client_writes(read_only_client, fake_w3, method, args):
    with pytest.raises(SignerMissingError):
        getattr(read_only_client, method)(*args)
    assert fake_w3.transactions == []


@pytest.mark.parametrize(
    "method,args,contract_field,contract_method",
    [
        ("register_operator", (), "operator_registry", "registerOperator"),
        ("opt_in_network", (NETWORK_ADDRESS,), "operator_network_opt_in_service", "optIn"),
        ("opt_out_network", (NETWORK_ADDRESS,), "operator_network_opt_in_service", "optOut"),
        ("opt_in_vault", (VAULT_ADDRESS,), "operator_vault_opt_in_service", "optIn"),
        ("opt_out_vault", (VAULT_ADDRESS,), "operator_vault_opt_in_service", "optOut"),
        (
            "register_native_operator",
            ("op", NETWORK_ADDRESS, 800, [NETWORK_ADDRESS]),
            "byz_operator_registry",
            "registerOperator",
        ),
        (
            "unregister_native_operator",
            (OPERATOR_INDEX,),
            "byz_operator_registry",
            "unregisterOperator",
        ),
        (
            "set_native_operator_manager",
            (OPERATOR_INDEX, [VAULT_ADDRESS], False),
            "byz_operator_registry",
            "setOperatorManager",
        ),
        (
            "transfer_native_admin_role",
            (OPERATOR_INDEX, VAULT_ADDRESS),
            "byz_operator_registry",
            "transferAdminRole",
        ),
        (
            "update_native_operator_fee",
            (OPERATOR_INDEX, 10),
            "byz_operator_registry",
            "updateOperatorFee",
        ),
    ],
)
def test_write_dispatch(client, fake_w3, method, args, contract_field, contract_method):
    """Each write method sends exactly one transaction to the right contract and function"""
    tx = getattr(client, method)(*args)
    assert len(fake_w3.transactions) == 1
    sent = fake_w3.transactions[0]
    assert sent.address == getattr(NETWORKS[CHAIN_ID], contract_field)
    assert sent.method == contract_method
    assert tx.hash == sent.hash
    assert tx.explorer_url.startswith(NETWORKS[CHAIN_ID].scan_link)


@pytest.mark.parametrize(
    "method,args,contract_field,contract_method,result",
    [
        ("is_operator", (NETWORK_ADDRESS,), "operator_registry", "isEntity", True),
        ("get_total_operators", (), "operator_registry", "totalEntities", 12),
        ("get_operator_at_index", (0,), "operator_registry", "entity", VAULT_ADDRESS),
        (
            "is_opted_in_network",
            (VAULT_ADDRESS, NETWORK_ADDRESS),
            "operator_network_opt_in_service",
            "isOptedIn",
            True,
        ),
        (
            "is_opted_in_vault",
            (NETWORK_ADDRESS, VAULT_ADDRESS),
            "operator_vault_opt_in_service",
            "isOptedIn",
            False,
        ),
        (
            "is_native_operator_registered",
            ("op",),
            "byz_operator_registry",
            "isOperatorRegistered",
            True,
        ),
        (
            "get_native_operator_admin",
            (OPERATOR_INDEX,),
            "byz_operator_registry",
            "getOperatorAdmin",
            VAULT_ADDRESS,
        ),
        (
            "get_native_operator_fee",
            (OPERATOR_INDEX,),
            "byz_operator_registry",
            "getOperatorFee",
            800,
        ),
        (
            "is_native_manager_of_operator",
            (OPERATOR_INDEX, VAULT_ADDRESS),
            "byz_operator_registry",
            "isManagerOfOperator",
            True,
        ),
    ],
)
def test_read_dispatch(client, fake_w3, method, args, contract_field, contract_method, result):
    fake_w3.set_result(contract_method, result)
    assert getattr(client, method)(*args) == result
    assert fake_w3.calls[-1].address == getattr(NETWORKS[CHAIN_ID], contract_field)
    assert fake_w3.calls[-1].method == contract_method
    assert fake_w3.transactions == []


def test_native_operator_id(client, fake_w3):
    fake_w3.set_result("getOperatorId", bytes.fromhex(OPERATOR_INDEX[2:]))
    assert client.get_native_operator_id("op") == OPERATOR_INDEX


def test_operator_status(client, fake_w3, account):
    opt_ins = client.sym_network_opt_in.address
    vault_opt_ins = client.sym_vault_opt_in.address
    fake_w3.set_result("isEntity", True)
    fake_w3.set_result("totalEntities", 7)
    fake_w3.set_result("isOptedIn", True, address=opt_ins)
    fake_w3.set_result("isOptedIn", False, address=vault_opt_ins)

    status = client.get_operator_status(networks=[NETWORK_ADDRESS], vaults=[VAULT_ADDRESS])
    assert status.address == account.address
    assert status.chain_id == CHAIN_ID
    assert status.is_symbiotic_operator
    assert status.total_symbiotic_operators == 7
    assert status.networks == {NETWORK_ADDRESS: True}
    assert status.vaults == {VAULT_ADDRESS: False}


def test_operator_status_needs_address(read_only_client):
    with pytest.raises(ConfigError, match="No address specified"):
        read_only_client.get_operator_status()


# --------------------------------------------------
# from_config
# --------------------------------------------------


@pytest.fixture()
def patch_web3(monkeypatch):
    """Replace the web3 constructor used by from_config with a fake"""
    created = []

    def _web3(provider):
        w3 = FakeWeb3()
        w3.provider = provider
        created.append(w3)
        return w3

    monkeypatch.setattr("byzop.client.Web3", _make_web3_stub(_web3))
    return created


def _make_web3_stub(factory):
    class _Web3Stub:
        HTTPProvider = staticmethod(lambda url: url)

        def __new__(cls, provider):
            return factory(provider)

    return _Web3Stub


def test_from_config_private_key(patch_web3):
    config = Config(rpc_url="http://localhost:8545", chain_id=1, private_key=TEST_PRIVATE_KEY)
    client = ByzOperatorClient.from_config(config)

    assert client.chain_id == 1
    assert client.address == Account.from_key(TEST_PRIVATE_KEY).address
    assert patch_web3[0].provider == "http://localhost:8545"


def test_from_config_mnemonic(patch_web3):
    mnemonic = "test test test test test test test test test test test junk"
    config = Config(rpc_url="http://localhost:8545", mnemonic=mnemonic)
    client = ByzOperatorClient.from_config(config)

    # first account of the well-known development mnemonic
    assert client.address == "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
    assert client.chain_id == CHAIN_ID


def test_from_config_read_only(patch_web3):
    client = ByzOperatorClient.from_config(Config(rpc_url="http://localhost:8545"))
    assert client.account is None


def test_from_config_no_rpc():
    with pytest.raises(ConfigError, match="rpc_url"):
        ByzOperatorClient.from_config(Config())


def test_from_config_not_connected(monkeypatch):
    def _disconnected(provider):
        return FakeWeb3(connected=False)

    monkeypatch.setattr("byzop.client.Web3", _make_web3_stub(_disconnected))
    with pytest.raises(ConnectionError, match="Failed to connect"):
        ByzOperatorClient.from_config(Config(rpc_url="http://localhost:1"))
