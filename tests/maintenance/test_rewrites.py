"""Tests for contract source rewrites."""

from __future__ import annotations

from examplehub.maintenance import SOURCE_REWRITES, SourceRewriter
from tests._fixtures.hub_builder import HubBuilder

LEGACY = """\
pragma solidity ^0.8.24;

import "fhevm/lib/TFHE.sol";
import "fhevm/config/ZamaFHEVMConfig.sol";
import "fhevm/config/ZamaGatewayConfig.sol";
import "fhevm/gateway/GatewayCaller.sol";

contract Auction is SepoliaZamaFHEVMConfig, SepoliaZamaGatewayConfig, GatewayCaller {
    function bid(euint64 amount) external {
        TFHE.allowThis(amount);
        TFHE.allow(amount, msg.sender);
    }
}
"""


def test_import_rewrite_covers_both_quote_styles() -> None:
    rewrite = SOURCE_REWRITES["imports"]

    result = rewrite.apply("import \"fhevm/lib/TFHE.sol\";\nimport 'fhevm/lib/Impl.sol';\n")

    assert result == "import \"@fhevm/solidity/lib/TFHE.sol\";\nimport '@fhevm/solidity/lib/Impl.sol';\n"


def test_allow_this_rewrite() -> None:
    result = SOURCE_REWRITES["allow-this"].apply(LEGACY)

    assert "TFHE.allow(amount, address(this));" in result
    assert "allowThis" not in result


def test_allow_this_keeps_nested_call_arguments_intact() -> None:
    source = "TFHE.allowThis(TFHE.add(a, b));\nTFHE.allowThis(f(x));\n"

    result = SOURCE_REWRITES["allow-this"].apply(source)

    assert result == (
        "TFHE.allow(TFHE.add(a, b), address(this));\nTFHE.allow(f(x), address(this));\n"
    )


def test_legacy_config_rewrite() -> None:
    result = SOURCE_REWRITES["legacy-config"].apply(LEGACY)

    assert "ZamaFHEVMConfig.sol" not in result
    assert "ZamaGatewayConfig.sol" not in result
    assert 'import "fhevm/gateway/GatewayCaller.sol";\nimport "fhevm/gateway/lib/Gateway.sol";' in result
    assert "contract Auction is GatewayCaller {" in result


def test_legacy_config_drops_lone_config_base() -> None:
    result = SOURCE_REWRITES["legacy-config"].apply("contract Counter is SepoliaZamaFHEVMConfig {\n}\n")

    assert result == "contract Counter {\n}\n"


def test_every_rewrite_is_idempotent() -> None:
    for rewrite in SOURCE_REWRITES.values():
        once = rewrite.apply(LEGACY)
        assert rewrite.apply(once) == once, rewrite.name


def test_rewriter_only_writes_changed_files(hub: HubBuilder) -> None:
    hub.add_example("auction", contract=LEGACY, contract_name="Auction")
    hub.add_example("modern", contract='import "@fhevm/solidity/lib/FHE.sol";\n', contract_name="Modern")
    rewriter = SourceRewriter(hub.config())

    report = rewriter.run(SOURCE_REWRITES["imports"])

    assert report.changed == [
        "examples/auction/contracts/Auction.sol",
        "base-template/contracts/MyContract.sol",
    ]
    assert report.unchanged == ["examples/modern/contracts/Modern.sol"]
    updated = hub.path("examples/auction/contracts/Auction.sol").read_text(encoding="utf-8")
    assert 'import "@fhevm/solidity/lib/TFHE.sol";' in updated

    second = rewriter.run(SOURCE_REWRITES["imports"])
    assert second.changed == []
    assert hub.path("examples/auction/contracts/Auction.sol").read_text(encoding="utf-8") == updated


def test_rewriter_dry_run_leaves_files(hub: HubBuilder) -> None:
    hub.add_example("auction", contract=LEGACY, contract_name="Auction")

    report = SourceRewriter(hub.config()).run(SOURCE_REWRITES["allow-this"], dry_run=True)

    assert report.changed == ["examples/auction/contracts/Auction.sol"]
    assert report.summary().startswith("[DRY RUN] allow-this: 1 changed")
    assert "TFHE.allowThis(amount)" in hub.path("examples/auction/contracts/Auction.sol").read_text(
        encoding="utf-8"
    )
