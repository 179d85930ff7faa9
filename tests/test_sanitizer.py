import pytest

from submarine.rust_types.sanitizer import (
    normalize_spaces,
    parse_and_sanitize,
    parse_rust_type,
    remove_as_trait,
    sanitize_rust_type,
)
from submarine.rust_types.types import Array, Base, Tuple


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Foo\nBar  Baz", "Foo Bar Baz"),
        ("Hello\tWorld   Test", "Hello World Test"),
        ("A\n\t B\r\n  C", "A B C"),
        ("Single Space", "Single Space"),
        ("", ""),
    ],
)
def test_normalize_spaces(text, expected):
    assert normalize_spaces(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<Foo as Trait>::Bar", "Foo::Bar"),
        ("<A as TraitA>::<B as TraitB>::method", "A::B::method"),
        ("regular::path::Type", "regular::path::Type"),
    ],
)
def test_remove_as_trait(text, expected):
    assert remove_as_trait(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Box<String>", "text"),
        ("String", "text"),
        ("Option<i32>", "Option<i32>"),
        ("Compact<u64>", "compact"),
        ("Vec<Compact<u64>>", "Vec<compact>"),
        ("Option<Box<Vec<u64>>>", "Option<Vec<u64>>"),
    ],
)
def test_parse_then_sanitize(text, expected):
    assert str(sanitize_rust_type(parse_rust_type(text))) == expected


@pytest.mark.parametrize(
    "rust_type, expected",
    [
        (Base(["Box"], [Base(["i32"])]), "i32"),
        (Base(["Vec"], [Base(["String"])]), "Vec<text>"),
        (Tuple([Base(["i32"]), Base(["String"])]), "(i32, text)"),
        (Array(Base(["u8"]), 32), "[u8; 32]"),
        (
            Base(["std", "collections", "HashMap"], [Base(["String"]), Base(["i32"])]),
            "std::collections::HashMap",
        ),
    ],
)
def test_sanitize_rust_type(rust_type, expected):
    assert str(sanitize_rust_type(rust_type)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<Foo  as\nTrait>::Bar", "Foo::Bar"),
        ("Vec<\t\tT>\t\n", "Vec<T>"),
        ("SimpleType", "SimpleType"),
        ("<A as  B<T>>::C", "A::C"),
    ],
)
def test_parse_and_sanitize(text, expected):
    assert str(parse_and_sanitize(text)) == expected


def test_bounded_drops_size_and_weak_keeps_generics():
    assert sanitize_rust_type(
        Base(["BoundedVec"], [Base(["u8"]), Base(["S"])])
    ) == Base(["Vec"], [Base(["u8"])])
    assert sanitize_rust_type(Base(["WeakBoundedVec"], [Base(["u8"])])) == Base(
        ["BoundedVec"], [Base(["u8"])]
    )


def test_vec_deque_and_pair_of():
    assert str(parse_and_sanitize("VecDeque<String>")) == "Vec<text>"
    assert str(parse_and_sanitize("PairOf<u32, u64>")) == "(u32, u64)"


def test_parse_rust_type_rejects_invalid():
    with pytest.raises(ValueError):
        parse_rust_type("Vec<u32")


def test_box_without_generic_raises():
    with pytest.raises(ValueError):
        sanitize_rust_type(Base(["Box"]))


GOLDEN = [
    ("<T::AuthorityId as RuntimeAppPublic>::Signature", "AuthorityId::Signature"),
    ("<T::Lookup as StaticLookup>::Source", "Lookup::Source"),
    ("AccountId", "AccountId"),
    ("AccountIndex", "AccountIndex"),
    ("AccountValidity", "AccountValidity"),
    ("AccountVote<BalanceOf<T>>", "AccountVote"),
    ("Approvals", "Approvals"),
    ("AuctionIndex", "AuctionIndex"),
    ("AuthorityId", "AuthorityId"),
    ("AuthorityList", "AuthorityList"),
    ("Balance", "Balance"),
    ("BalanceOf<T, I>", "Balance"),
    ("BalanceOf<T>", "Balance"),
    ("BlockNumber", "BlockNumber"),
    ("BountyIndex", "BountyIndex"),
    ("Box<<T as Config<I>>::Proposal>", "Proposal"),
    ("Box<<T as Config>::Call>", "Call"),
    ("Box<<T as Trait<I>>::Proposal>", "Proposal"),
    ("Box<<T as Trait>::Call>", "Call"),
    ("Box<EquivocationProof<T::Hash, T::BlockNumber>>", "EquivocationProof"),
    ("Box<EquivocationProof<T::Header>>", "EquivocationProof"),
    ("Box<IdentityInfo<T::MaxAdditionalFields>>", "IdentityInfo"),
    ("Box<RawSolution<CompactOf<T>>>", "RawSolution"),
    ("Box<RawSolution<SolutionOf<T>>>", "RawSolution"),
    ("CallHash", "CallHash"),
    ("CallHashOf<T>", "CallHash"),
    ("CollatorId", "CollatorId"),
    ("Compact<AuctionIndex>", "compact"),
    ("Compact<BalanceOf<T, I>>", "compact"),
    ("Compact<BalanceOf<T>>", "compact"),
    ("Compact<BountyIndex>", "compact"),
    ("Compact<EraIndex>", "compact"),
    ("Compact<LeasePeriodOf<T>>", "compact"),
    ("Compact<MemberCount>", "compact"),
    ("Compact<ParaId>", "compact"),
    ("Compact<PropIndex>", "compact"),
    ("Compact<ProposalIndex>", "compact"),
    ("Compact<ReferendumIndex>", "compact"),
    ("Compact<RegistrarIndex>", "compact"),
    ("Compact<SubId>", "compact"),
    ("Compact<T::Balance>", "compact"),
    ("Compact<T::BlockNumber>", "compact"),
    ("Compact<T::Moment>", "compact"),
    ("Compact<Weight>", "compact"),
    ("Compact<u32>", "compact"),
    ("CompactAssignments", "CompactAssignments"),
    ("Conviction", "Conviction"),
    ("Data", "Data"),
    ("DefunctVoter<<T::Lookup as StaticLookup>::Source>", "DefunctVoter"),
    ("DispatchError", "DispatchError"),
    ("DispatchInfo", "DispatchInfo"),
    ("DispatchResult", "DispatchResult"),
    (
        "DoubleVoteReport<<T::KeyOwnerProofSystem as\n"
        "                 KeyOwnerProofSystem<(KeyTypeId, ValidatorId)>>::Proof>",
        "DoubleVoteReport",
    ),
    ("EcdsaSignature", "EcdsaSignature"),
    ("ElectionCompute", "ElectionCompute"),
    ("ElectionScore", "ElectionScore"),
    ("ElectionSize", "ElectionSize"),
    ("EquivocationProof<T::Hash, T::BlockNumber>", "EquivocationProof"),
    ("EquivocationProof<T::Header>", "EquivocationProof"),
    ("EraIndex", "EraIndex"),
    ("EthereumAddress", "EthereumAddress"),
    ("Hash", "Hash"),
    ("HeadData", "HeadData"),
    ("Heartbeat<T::BlockNumber>", "Heartbeat"),
    ("IdentityFields", "IdentityFields"),
    ("IdentityInfo", "IdentityInfo"),
    ("Judgement<BalanceOf<T>>", "Judgement"),
    ("Key", "Key"),
    ("Kind", "Kind"),
    ("LeasePeriod", "LeasePeriod"),
    ("MemberCount", "MemberCount"),
    ("MoreAttestations", "MoreAttestations"),
    ("NewBidder<AccountId>", "NewBidder"),
    ("NextConfigDescriptor", "NextConfigDescriptor"),
    ("OpaqueCall", "OpaqueCall"),
    ("OpaqueTimeSlot", "OpaqueTimeSlot"),
    (
        "Option<(BalanceOf<T>, BalanceOf<T>, T::BlockNumber)>",
        "Option<(Balance, Balance, BlockNumber)>",
    ),
    ("Option<ChangesTrieConfiguration>", "Option<ChangesTrieConfiguration>"),
    ("Option<ElectionCompute>", "Option<ElectionCompute>"),
    ("Option<ElectionScore>", "Option<ElectionScore>"),
    ("Option<Percent>", "Option<Percent>"),
    ("Option<ReferendumIndex>", "Option<ReferendumIndex>"),
    ("Option<StatementKind>", "Option<StatementKind>"),
    ("Option<T::AccountId>", "Option<AccountId>"),
    ("Option<T::ProxyType>", "Option<ProxyType>"),
    ("Option<Timepoint<T::BlockNumber>>", "Option<Timepoint>"),
    ("Option<schedule::Period<T::BlockNumber>>", "Option<schedule::Period>"),
    ("Option<u32>", "Option<u32>"),
    ("ParaId", "ParaId"),
    ("ParaInfo", "ParaInfo"),
    ("Perbill", "Perbill"),
    ("Percent", "Percent"),
    ("Permill", "Permill"),
    ("PhragmenScore", "PhragmenScore"),
    ("PropIndex", "PropIndex"),
    ("ProposalIndex", "ProposalIndex"),
    ("ProxyType", "ProxyType"),
    ("RawSolution<CompactOf<T>>", "RawSolution"),
    ("ReadySolution<T::AccountId>", "ReadySolution"),
    ("ReferendumIndex", "ReferendumIndex"),
    ("RegistrarIndex", "RegistrarIndex"),
    ("Remark", "Remark"),
    ("Renouncing", "Renouncing"),
    ("RewardDestination", "RewardDestination"),
    ("RewardDestination<T::AccountId>", "RewardDestination"),
    ("SessionIndex", "SessionIndex"),
    ("SlotRange", "SlotRange"),
    ("SolutionOrSnapshotSize", "SolutionOrSnapshotSize"),
    ("Status", "Status"),
    ("Supports<T::AccountId>", "Supports"),
    ("T::AccountId", "AccountId"),
    ("T::AccountIndex", "AccountIndex"),
    ("T::BlockNumber", "BlockNumber"),
    ("T::Hash", "Hash"),
    ("T::KeyOwnerProof", "KeyOwnerProof"),
    ("T::Keys", "Keys"),
    ("T::ProxyType", "ProxyType"),
    ("TaskAddress<BlockNumber>", "TaskAddress"),
    ("Timepoint<BlockNumber>", "Timepoint"),
    ("Timepoint<T::BlockNumber>", "Timepoint"),
    ("ValidationCode", "ValidationCode"),
    ("ValidatorPrefs", "ValidatorPrefs"),
    ("Vec<(AccountId, Balance)>", "Vec<(AccountId, Balance)>"),
    ("Vec<(T::AccountId, Data)>", "Vec<(AccountId, Data)>"),
    ("Vec<(T::AccountId, u32)>", "Vec<(AccountId, u32)>"),
    ("Vec<<T as Config>::Call>", "Vec<Call>"),
    ("Vec<<T as Trait>::Call>", "Vec<Call>"),
    ("Vec<<T::Lookup as StaticLookup>::Source>", "Vec<Lookup::Source>"),
    ("Vec<AccountId>", "Vec<AccountId>"),
    ("Vec<AttestedCandidate>", "Vec<AttestedCandidate>"),
    ("Vec<IdentificationTuple>", "Vec<IdentificationTuple>"),
    ("Vec<Key>", "Vec<Key>"),
    ("Vec<KeyValue>", "Vec<KeyValue>"),
    ("Vec<T::AccountId>", "Vec<AccountId>"),
    ("Vec<T::Header>", "Vec<Header>"),
    ("Vec<ValidatorIndex>", "Vec<ValidatorIndex>"),
    ("Vec<u32>", "Vec<u32>"),
    ("VestingInfo<BalanceOf<T>, T::BlockNumber>", "VestingInfo"),
    ("VoteThreshold", "VoteThreshold"),
    ("Weight", "Weight"),
    ("[u8; 32]", "[u8; 32]"),
    ("bool", "bool"),
    ("schedule::Priority", "schedule::Priority"),
    ("sp_std::marker::PhantomData<(AccountId, Event)>", "empty"),
    ("u16", "u16"),
    ("u32", "u32"),
    ("u64", "u64"),
]


@pytest.mark.parametrize("text, expected", GOLDEN)
def test_parse_and_sanitize_golden(text, expected):
    assert str(parse_and_sanitize(text)) == expected