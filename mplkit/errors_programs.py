"""Error tables for the Auction House, Auctioneer and Candy Machine programs.

Keys are upper-case hexadecimal error codes without a prefix; values are
``"Name: message"`` strings, or just ``"Name"`` where no message exists.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class ProgramDomain(str, Enum):
    """On-chain programs whose custom error codes are known."""

    AUCTION_HOUSE = "Auction House"
    AUCTIONEER = "Auctioneer"
    CANDY_MACHINE = "Candy Machine"
    CANDY_CORE = "Candy Core"
    CANDY_GUARD = "Candy Guard"


AUCTIONEER_ERRORS: Mapping[str, str] = MappingProxyType(
    {
        "1770": "BumpSeedNotInHashMap: Bump seed not in hash map",
        "1771": "AuctionNotStarted: Auction has not started yet",
        "1772": "AuctionEnded: Auction has ended",
        "1773": "AuctionActive: Auction has not ended yet",
        "1774": "BidTooLow: The bid was lower than the highest bid",
        "1775": "SignerNotAuth: The signer must be the Auction House authority",
        "1776": "NotHighestBidder: Execute Sale must be run on the highest bidder",
        "1777": "BelowReservePrice: The bid price must be greater than the reserve price",
        "1778": "BelowBidIncrement: The bid must match the highest bid plus the minimum bid increment",
        "1779": "CannotCancelHighestBid: The highest bidder is not allowed to cancel",
    }
)

AUCTION_HOUSE_ERRORS: Mapping[str, str] = MappingProxyType(
    {
        "1770": "PublicKeyMismatch: PublicKeyMismatch",
        "1771": "InvalidMintAuthority: InvalidMintAuthority",
        "1772": "UninitializedAccount: UninitializedAccount",
        "1773": "IncorrectOwner: IncorrectOwner",
        "1774": "PublicKeysShouldBeUnique: PublicKeysShouldBeUnique",
        "1775": "StatementFalse: StatementFalse",
        "1776": "NotRentExempt: NotRentExempt",
        "1777": "NumericalOverflow: NumericalOverflow",
        "1778": "ExpectedSolAccount: Expected a sol account but got an spl token account instead",
        "1779": "CannotExchangeSOLForSol: Cannot exchange sol for sol",
        "177A": "SOLWalletMustSign: If paying with sol, sol wallet must be signer",
        "177B": "CannotTakeThisActionWithoutAuctionHouseSignOff: Cannot take this action without auction house signing too",
        "177C": "NoPayerPresent: No payer present on this txn",
        "177D": "DerivedKeyInvalid: Derived key invalid",
        "177E": "MetadataDoesntExist: Metadata doesn't exist",
        "177F": "InvalidTokenAmount: Invalid token amount",
        "1780": "BothPartiesNeedToAgreeToSale: Both parties need to agree to this sale",
        "1781": "CannotMatchFreeSalesWithoutAuctionHouseOrSellerSignoff: Cannot match free sales unless the auction house or seller signs off",
        "1782": "SaleRequiresSigner: This sale requires a signer",
        "1783": "OldSellerNotInitialized: Old seller not initialized",
        "1784": "SellerATACannotHaveDelegate: Seller ata cannot have a delegate set",
        "1785": "BuyerATACannotHaveDelegate: Buyer ata cannot have a delegate set",
        "1786": "NoValidSignerPresent: No valid signer present",
        "1787": "InvalidBasisPoints: BP must be less than or equal to 10000",
        "1788": "TradeStateDoesntExist: The trade state account does not exist",
        "1789": "TradeStateIsNotEmpty: The trade state is not empty",
        "178A": "ReceiptIsEmpty: The receipt is empty",
        "178B": "InstructionMismatch: The instruction does not match",
        "178C": "InvalidAuctioneer: Invalid Auctioneer for this Auction House instance.",
        "178D": "MissingAuctioneerScope: The Auctioneer does not have the correct scope for this action.",
        "178E": "MustUseAuctioneerHandler: Must use auctioneer handler.",
        "178F": "NoAuctioneerProgramSet: No Auctioneer program set.",
        "1790": "TooManyScopes: Too many scopes.",
        "1791": "AuctionHouseNotDelegated: Auction House not delegated.",
        "1792": "BumpSeedNotInHashMap: Bump seed not in hash map.",
        "1793": "EscrowUnderRentExemption: The instruction would drain the escrow below rent exemption threshold",
        "1794": "InvalidSeedsOrAuctionHouseNotDelegated: Invalid seeds or Auction House not delegated",
        "1795": "BuyerTradeStateNotValid: The buyer trade state was unable to be initialized.",
        "1796": "MissingElementForPartialOrder: Partial order size and price must both be provided in a partial buy.",
        "1797": "NotEnoughTokensAvailableForPurchase: Amount of tokens available for purchase is less than the partial order amount.",
        "1798": "PartialPriceMismatch: Calculated partial price does not not partial price that was provided.",
        "1799": "AuctionHouseAlreadyDelegated: Auction House already delegated.",
        "179A": "AuctioneerAuthorityMismatch: Auctioneer Authority Mismatch",
        "179B": "InsufficientFunds: Insufficient funds in escrow account to purchase.",
    }
)

CANDY_GUARD_ERRORS: Mapping[str, str] = MappingProxyType(
    {
        "1770": "InvalidAccountSize: Could not save guard to account",
        "1771": "DeserializationError: Could not deserialize guard",
        "1772": "PublicKeyMismatch: Public key mismatch",
        "1773": "DataIncrementLimitExceeded: Exceeded account increase limit",
        "1774": "IncorrectOwner: Account does not have correct owner",
        "1775": "Uninitialized: Account is not initialized",
        "1776": "MissingRemainingAccount: Missing expected remaining account",
        "1777": "NumericalOverflowError: Numerical overflow error",
        "1778": "RequiredGroupLabelNotFound: Missing required group label",
        "1779": "GroupNotFound: Group not found",
        "177A": "ExceededLength: Value exceeded maximum length",
        "177B": "CandyMachineEmpty: Candy machine is empty",
        "177C": "InstructionNotFound: No instruction was found",
        "177D": "CollectionKeyMismatch: Collection public key mismatch",
        "177E": "MissingCollectionAccounts: Missing collection accounts",
        "177F": "CollectionUpdateAuthorityKeyMismatch: Collection update authority public key mismatch",
        "1780": "MintNotLastTransaction: Mint must be the last instructions of the transaction",
        "1781": "MintNotLive: Mint is not live",
        "1782": "NotEnoughSOL: Not enough SOL to pay for the mint",
        "1783": "TokenBurnFailed: Token burn failed",
        "1784": "NotEnoughTokens: Not enough tokens on the account",
        "1785": "TokenTransferFailed: Token transfer failed",
        "1786": "MissingRequiredSignature: A signature was required but not found",
        "1787": "GatewayTokenInvalid: Gateway token is not valid",
        "1788": "AfterEndDate: Current time is after the set end date",
        "1789": "InvalidMintTime: Current time is not within the allowed mint time",
        "178A": "AddressNotFoundInAllowedList: Address not found on the allowed list",
        "178B": "MissingAllowedListProof: Missing allowed list proof",
        "178C": "AllowedListNotEnabled: Allow list guard is not enabled",
        "178D": "AllowedMintLimitReached: The maximum number of allowed mints was reached",
        "178E": "InvalidNftCollection: Invalid NFT collection",
        "178F": "MissingNft: Missing NFT on the account",
        "1790": "MaximumRedeemedAmount: Current redemeed items is at the set maximum amount",
        "1791": "AddressNotAuthorized: Address not authorized",
        "1792": "MissingFreezeInstruction: Missing freeze instruction data",
        "1793": "FreezeGuardNotEnabled: Freeze guard must be enabled",
        "1794": "FreezeNotInitialized: Freeze must be initialized",
        "1795": "MissingFreezePeriod: Missing freeze period",
        "1796": "FreezeEscrowAlreadyExists: The freeze escrow account already exists",
        "1797": "ExceededMaximumFreezePeriod: Maximum freeze period exceeded",
        "1798": "ThawNotEnabled: Thaw is not enabled",
        "1799": "UnlockNotEnabled: Unlock is not enabled (not all NFTs are thawed)",
        "179A": "DuplicatedGroupLabel: Duplicated group label",
        "179B": "DuplicatedMintLimitId: Duplicated mint limit id",
        "179C": "UnauthorizedProgramFound: An unauthorized program was found in the transaction",
        "179D": "ExceededProgramListSize: Exceeded the maximum number of programs in the additional list",
    }
)

CANDY_CORE_ERRORS: Mapping[str, str] = MappingProxyType(
    {
        "1770": "IncorrectOwner: Account does not have correct owner",
        "1771": "Uninitialized: Account is not initialized",
        "1772": "MintMismatch: Mint Mismatch",
        "1773": "IndexGreaterThanLength: Index greater than length",
        "1774": "NumericalOverflowError: Numerical overflow error",
        "1775": "TooManyCreators: Can only provide up to 4 creators to candy machine (because candy machine is one)",
        "1776": "CandyMachineEmpty: Candy machine is empty",
        "1777": "HiddenSettingsDoNotHaveConfigLines: Candy machines using hidden uris do not have config lines, they have a single hash representing hashed order",
        "1778": "CannotChangeNumberOfLines: Cannot change number of lines unless is a hidden config",
        "1779": "CannotSwitchToHiddenSettings: Cannot switch to hidden settings after items available is greater than 0",
        "177A": "IncorrectCollectionAuthority: Incorrect collection NFT authority",
        "177B": "MetadataAccountMustBeEmpty: The metadata account has data in it, and this must be empty to mint a new NFT",
        "177C": "NoChangingCollectionDuringMint: Can't change collection settings after items have begun to be minted",
        "177D": "ExceededLengthError: Value longer than expected maximum value",
        "177E": "MissingConfigLinesSettings: Missing config lines settings",
        "177F": "CannotIncreaseLength: Cannot increase the length in config lines settings",
        "1780": "CannotSwitchFromHiddenSettings: Cannot switch from hidden settings",
        "1781": "CannotChangeSequentialIndexGeneration: Cannot change sequential index generation after items have begun to be minted",
        "1782": "CollectionKeyMismatch: Collection public key mismatch",
        "1783": "CouldNotRetrieveConfigLineData: Could not retrive config line data",
        "1784": "NotFullyLoaded: Not all config lines were added to the candy machine",
    }
)

CANDY_MACHINE_ERRORS: Mapping[str, str] = MappingProxyType(
    {
        "1770": "IncorrectOwner: Account does not have correct owner!",
        "1771": "Uninitialized: Account is not initialized!",
        "1772": "MintMismatch: Mint Mismatch!",
        "1773": "IndexGreaterThanLength: Index greater than length!",
        "1774": "NumericalOverflowError: Numerical overflow error!",
        "1775": "TooManyCreators: Can only provide up to 4 creators to candy machine (because candy machine is one)!",
        "1776": "UuidMustBeExactly6Length: Uuid must be exactly of 6 length",
        "1777": "NotEnoughTokens: Not enough tokens to pay for this minting",
        "1778": "NotEnoughSOL: Not enough SOL to pay for this minting",
        "1779": "TokenTransferFailed: Token transfer failed",
        "177A": "CandyMachineEmpty: Candy machine is empty!",
        "177B": "CandyMachineNotLive: Candy machine is not live!",
        "177C": "HiddenSettingsConfigsDoNotHaveConfigLines: Configs that are using hidden uris do not have config lines, they have a single hash representing hashed order",
        "177D": "CannotChangeNumberOfLines: Cannot change number of lines unless is a hidden config",
        "177E": "DerivedKeyInvalid: Derived key invalid",
        "177F": "PublicKeyMismatch: Public key mismatch",
        "1780": "NoWhitelistToken: No whitelist token present",
        "1781": "TokenBurnFailed: Token burn failed",
        "1782": "GatewayAppMissing: Missing gateway app when required",
        "1783": "GatewayTokenMissing: Missing gateway token when required",
        "1784": "GatewayTokenExpireTimeInvalid: Invalid gateway token expire time",
        "1785": "NetworkExpireFeatureMissing: Missing gateway network expire feature when required",
        "1786": "CannotFindUsableConfigLine: Unable to find an unused config line near your random number index",
        "1787": "InvalidString: Invalid string",
        "1788": "SuspiciousTransaction: Suspicious transaction detected",
        "1789": "CannotSwitchToHiddenSettings: Cannot Switch to Hidden Settings after items available is greater than 0",
        "178A": "IncorrectSlotHashesPubkey: Incorrect SlotHashes PubKey",
        "178B": "IncorrectCollectionAuthority: Incorrect collection NFT authority",
        "178C": "MismatchedCollectionPDA: Collection PDA address is invalid",
        "178D": "MismatchedCollectionMint: Provided mint account doesn't match collection PDA mint",
        "178E": "SlotHashesEmpty: Slot hashes Sysvar is empty",
        "178F": "MetadataAccountMustBeEmpty: The metadata account has data in it, and this must be empty to mint a new NFT",
        "1790": "MissingSetCollectionDuringMint: Missing set collection during mint IX for Candy Machine with collection set",
        "1791": "NoChangingCollectionDuringMint: Can't change collection settings after items have begun to be minted",
        "1792": "CandyCollectionRequiresRetainAuthority: Retain authority must be true for Candy Machines with a collection set",
        "1793": "GatewayProgramError: Error within Gateway program",
        "1794": "NoChangingFreezeDuringMint",
        "1795": "NoChangingAuthorityWithCollection: Can't change authority while collection is enabled. Disable collection first.",
        "1796": "NoChangingTokenWithFreeze: Can't change token while freeze is enabled. Disable freeze first.",
        "1797": "InvalidThawNft: Cannot thaw NFT unless all NFTs are minted or Candy Machine authority enables thawing",
        "1798": "IncorrectRemainingAccountsLen: The number of remaining accounts passed in doesn't match the Candy Machine settings",
        "1799": "MissingFreezeAta: FreezePDA ATA needs to be passed in if token mint is enabled.",
        "179A": "IncorrectFreezeAta: Incorrect freeze ATA address.",
        "179B": "FreezePDAMismatch: FreezePDA doesn't belong to this Candy Machine.",
        "179C": "EnteredFreezeIsMoreThanMaxFreeze: Freeze time can't be longer than MAX_FREEZE_TIME.",
        "179D": "NoWithdrawWithFreeze: Can't withdraw Candy Machine while freeze is active. Disable freeze first.",
        "179E": "NoWithdrawWithFrozenFunds",
        "179F": "MissingRemoveFreezeTokenAccounts: Missing required remaining accounts for remove_freeze with token mint.",
        "17A0": "InvalidFreezeWithdrawTokenAddress: Can't withdraw SPL Token from freeze PDA into itself",
        "17A1": "NoUnlockWithNFTsStillFrozen: Can't unlock funds while NFTs are still frozen. Run thaw on all NFTs first.",
        "17A2": "SizedCollectionMetadataMustBeMutable: Setting a sized collection requires the collection metadata to be mutable.",
        "17A3": "CannotSwitchFromHiddenSettings: Cannot remove Hidden Settings.",
    }
)

PROGRAM_ERRORS: Mapping[ProgramDomain, Mapping[str, str]] = MappingProxyType(
    {
        ProgramDomain.AUCTION_HOUSE: AUCTION_HOUSE_ERRORS,
        ProgramDomain.AUCTIONEER: AUCTIONEER_ERRORS,
        ProgramDomain.CANDY_MACHINE: CANDY_MACHINE_ERRORS,
        ProgramDomain.CANDY_CORE: CANDY_CORE_ERRORS,
        ProgramDomain.CANDY_GUARD: CANDY_GUARD_ERRORS,
    }
)


def lookup_program_error(
    domain: Union[ProgramDomain, str], hex_code: str
) -> Optional[str]:
    """Return the error a program reports for a hex code, or None if unknown.

    ``domain`` is a :class:`ProgramDomain` or its display name; an unknown
    name raises ``ValueError``.
    """
    table = PROGRAM_ERRORS[ProgramDomain(domain)]
    return table.get(hex_code.upper())