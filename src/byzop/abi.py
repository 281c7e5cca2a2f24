"""
Minimal ABIs for the contracts the SDK calls.

Only the functions and custom errors used by the clients are included.
"""


def _fn(
    name: str,
    inputs: list[tuple[str, str]],
    outputs: list[str] | None = None,
    mutability: str = "nonpayable",
) -> dict:
    return {
        "inputs": [{"internalType": t, "name": n, "type": t} for n, t in inputs],
        "name": name,
        "outputs": [{"internalType": t, "name": "", "type": t} for t in (outputs or [])],
        "stateMutability": mutability,
        "type": "function",
    }


def _error(name: str) -> dict:
    return {"inputs": [], "name": name, "type": "error"}


NATIVE_OPERATOR_REGISTRY_ABI: list[dict] = [
    _error("OperatorAlreadyRegistered"),
    _error("OperatorNotRegistered"),
    _error("NotOperatorAdmin"),
    _error("InvalidOperatorFee"),
    _fn(
        "registerOperator",
        [
            ("_name", "string"),
            ("_admin", "address"),
            ("_operatorFee", "uint16"),
            ("_managers", "address[]"),
        ],
        ["bytes32"],
    ),
    _fn("unregisterOperator", [("_operatorIndex", "bytes32")]),
    _fn("isOperatorRegistered", [("_name", "string")], ["bool"], "view"),
    _fn("getOperatorId", [("_name", "string")], ["bytes32"], "pure"),
    _fn("getOperatorAdmin", [("_operatorIndex", "bytes32")], ["address"], "view"),
    _fn("getOperatorFee", [("_operatorIndex", "bytes32")], ["uint16"], "view"),
    _fn(
        "isManagerOfOperator",
        [("_operatorIndex", "bytes32"), ("_address", "address")],
        ["bool"],
        "view",
    ),
    _fn(
        "setOperatorManager",
        [("_operatorIndex", "bytes32"), ("_managers", "address[]"), ("_isManager", "bool")],
    ),
    _fn("transferAdminRole", [("_operatorIndex", "bytes32"), ("_newAdmin", "address")]),
    _fn("updateOperatorFee", [("_operatorIndex", "bytes32"), ("_operatorFee", "uint16")]),
]

SYMBIOTIC_OPERATOR_REGISTRY_ABI: list[dict] = [
    _error("EntityNotExist"),
    _error("OperatorAlreadyRegistered"),
    {
        "anonymous": False,
        "inputs": [
            {
                "indexed": True,
                "internalType": "address",
                "name": "entity",
                "type": "address",
            }
        ],
        "name": "AddEntity",
        "type": "event",
    },
    _fn("entity", [("index", "uint256")], ["address"], "view"),
    _fn("isEntity", [("entity_", "address")], ["bool"], "view"),
    _fn("registerOperator", []),
    _fn("totalEntities", [], ["uint256"], "view"),
]


def _opt_in_service_abi() -> list[dict]:
    # the network and vault opt-in services are two deployments of the same contract
    return [
        _error("AlreadyOptedIn"),
        _error("NotOptedIn"),
        _error("NotWhereEntity"),
        _error("NotWho"),
        _error("OptOutCooldown"),
        _fn("optIn", [("where", "address")]),
        _fn("optOut", [("where", "address")]),
        _fn("isOptedIn", [("who", "address"), ("where", "address")], ["bool"], "view"),
    ]


NETWORK_OPT_IN_SERVICE_ABI: list[dict] = _opt_in_service_abi()
VAULT_OPT_IN_SERVICE_ABI: list[dict] = _opt_in_service_abi()
