import pytest

from standards.exceptions import ConfigurationError
from standards.models.classification_result import (
    EmptyOrUnverifiedSurface,
    MatchedStandard,
    NoStandardMatched,
)
from standards.models.contract_abi import ContractSurface
from standards.models.token_standard import StandardCatalog, StandardDefinition
from standards.service.standard_classifier_service import StandardClassifierService

ERC20_MEMBERS = {
    "totalSupply", "transfer", "transferFrom", "balanceOf",
    "approve", "allowance", "Transfer", "Approval",
}
ERC721_MEMBERS = {
    "balanceOf", "ownerOf", "safeTransferFrom", "transferFrom", "approve",
    "setApprovalForAll", "getApproved", "isApprovedForAll",
    "Transfer", "Approval", "ApprovalForAll",
}
ERC1155_MEMBERS = {
    "balanceOf", "balanceOfBatch", "setApprovalForAll", "isApprovedForAll",
    "safeTransferFrom", "safeBatchTransferFrom",
    "TransferSingle", "TransferBatch", "ApprovalForAll", "URI",
}


@pytest.fixture
def catalog():
    return StandardCatalog.of([
        StandardDefinition.of("ERC-20", ERC20_MEMBERS),
        StandardDefinition.of("ERC-721", ERC721_MEMBERS),
        StandardDefinition.of("ERC-1155", ERC1155_MEMBERS),
    ])


def test_erc20_surface_matches_erc20(catalog):
    surface = ContractSurface.of(ERC20_MEMBERS)

    result = StandardClassifierService.classify(surface, catalog)

    assert result == MatchedStandard(standard="ERC-20")


def test_empty_surface_is_empty_or_unverified(catalog):
    result = StandardClassifierService.classify(ContractSurface.of([]), catalog)

    assert isinstance(result, EmptyOrUnverifiedSurface)


def test_empty_surface_wins_regardless_of_catalog_order():
    reversed_catalog = StandardCatalog.of([
        StandardDefinition.of("ERC-1155", ERC1155_MEMBERS),
        StandardDefinition.of("ERC-20", ERC20_MEMBERS),
    ])

    result = StandardClassifierService.classify(ContractSurface(), reversed_catalog)

    assert isinstance(result, EmptyOrUnverifiedSurface)


def test_unrelated_surface_matches_nothing(catalog):
    result = StandardClassifierService.classify(ContractSurface.of({"foo", "bar"}), catalog)

    assert isinstance(result, NoStandardMatched)


def test_single_missing_member_disqualifies(catalog):
    surface = ContractSurface.of(ERC20_MEMBERS - {"allowance"})

    result = StandardClassifierService.classify(surface, catalog)

    assert isinstance(result, NoStandardMatched)


def test_later_standard_matches_when_earlier_ones_do_not(catalog):
    # A typical NFT has no totalSupply/transfer/allowance, so ERC-20 fails first
    surface = ContractSurface.of(ERC721_MEMBERS | {"name", "symbol", "tokenURI", "supportsInterface"})

    result = StandardClassifierService.classify(surface, catalog)

    assert result == MatchedStandard(standard="ERC-721")


def test_erc1155_surface(catalog):
    result = StandardClassifierService.classify(ContractSurface.of(ERC1155_MEMBERS | {"uri"}), catalog)

    assert result == MatchedStandard(standard="ERC-1155")


def test_superset_surface_resolves_to_earliest_standard(catalog):
    surface = ContractSurface.of(ERC20_MEMBERS | ERC721_MEMBERS | ERC1155_MEMBERS)

    result = StandardClassifierService.classify(surface, catalog)

    assert result == MatchedStandard(standard="ERC-20")


def test_catalog_order_decides_ambiguous_surfaces():
    surface = ContractSurface.of(ERC20_MEMBERS | ERC721_MEMBERS)
    nft_first = StandardCatalog.of([
        StandardDefinition.of("ERC-721", ERC721_MEMBERS),
        StandardDefinition.of("ERC-20", ERC20_MEMBERS),
    ])

    result = StandardClassifierService.classify(surface, nft_first)

    assert result == MatchedStandard(standard="ERC-721")


def test_matching_is_case_sensitive(catalog):
    surface = ContractSurface.of(name.lower() for name in ERC20_MEMBERS)

    result = StandardClassifierService.classify(surface, catalog)

    assert isinstance(result, NoStandardMatched)


def test_events_and_functions_share_one_namespace():
    # "Transfer" satisfies the requirement whether it came from an event or a function
    definition = StandardDefinition.of("X", {"Transfer", "transfer"})
    catalog = StandardCatalog.of([definition])

    result = StandardClassifierService.classify(ContractSurface.of({"Transfer", "transfer"}), catalog)

    assert result == MatchedStandard(standard="X")


def test_classification_is_idempotent(catalog):
    surface = ContractSurface.of(ERC20_MEMBERS | {"mint"})

    results = {StandardClassifierService.classify(surface, catalog) for _ in range(5)}

    assert results == {MatchedStandard(standard="ERC-20")}


def test_empty_catalog_is_configuration_error():
    with pytest.raises(ConfigurationError):
        StandardClassifierService.classify(ContractSurface.of({"foo"}), StandardCatalog())


def test_empty_catalog_is_reported_even_for_empty_surface():
    with pytest.raises(ConfigurationError):
        StandardClassifierService.classify(ContractSurface(), StandardCatalog())


def test_missing_catalog_is_configuration_error():
    with pytest.raises(ConfigurationError):
        StandardClassifierService.classify(ContractSurface.of({"foo"}), None)


def test_definition_without_members_is_configuration_error():
    catalog = StandardCatalog(definitions=(
        StandardDefinition.of("ERC-20", ERC20_MEMBERS),
        StandardDefinition.of("EMPTY", []),
    ))

    with pytest.raises(ConfigurationError, match="EMPTY"):
        StandardClassifierService.classify(ContractSurface.of({"foo"}), catalog)


def test_none_surface_is_caller_error(catalog):
    with pytest.raises(TypeError):
        StandardClassifierService.classify(None, catalog)
