from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stripe_contracts.services.stripe.types.common import (
    Address,
    AddressParams,
    DeletedObject,
    DocumentParams,
    Empty,
    ExpandableParams,
    ExpandedObject,
    JapanAddress,
    JapanAddressParams,
    ListParams,
    ListResponse,
    Metadata,
    RangeQuery,
    StripeParams,
    Timestamp,
    VerificationDocument,
)

CapabilityName = Literal["card_issuing", "card_payments", "legacy_payments", "transfers"]
CapabilityState = Literal["active", "inactive", "pending"]
AccountType = Literal["custom", "express", "standard"]
PayoutInterval = Literal["daily", "manual", "monthly", "weekly"]
Weekday = Literal[
    "friday", "monday", "saturday", "sunday", "thursday", "tuesday", "wednesday"
]


# ---------------------------------------------------------------------------
# External accounts
# ---------------------------------------------------------------------------


class BankAccount(BaseModel):
    id: str
    object: Literal["bank_account"] = "bank_account"
    account: str | ExpandedObject | None = None
    account_holder_name: str | None = None
    account_holder_type: str | None = None
    bank_name: str | None = None
    country: str
    currency: str
    customer: str | ExpandedObject | None = None
    default_for_currency: bool | None = None
    fingerprint: str | None = None
    last4: str
    metadata: Metadata | None = None
    routing_number: str | None = None
    status: str


class Card(BaseModel):
    id: str
    object: Literal["card"] = "card"
    account: str | ExpandedObject | None = None
    address_city: str | None = None
    address_country: str | None = None
    address_line1: str | None = None
    address_line1_check: str | None = None
    address_line2: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    address_zip_check: str | None = None
    brand: str
    country: str | None = None
    currency: str | None = None
    customer: str | ExpandedObject | None = None
    cvc_check: str | None = None
    default_for_currency: bool | None = None
    dynamic_last4: str | None = None
    exp_month: int
    exp_year: int
    fingerprint: str | None = None
    funding: str
    last4: str
    metadata: Metadata = {}
    name: str | None = None
    tokenization_method: str | None = None


class DeletedBankAccount(DeletedObject):
    object: Literal["bank_account"] = "bank_account"


class DeletedCard(DeletedObject):
    object: Literal["card"] = "card"


ExternalAccount = Annotated[BankAccount | Card, Field(discriminator="object")]
DeletedExternalAccount = Annotated[
    DeletedBankAccount | DeletedCard, Field(discriminator="object")
]


class ExternalAccountListResponse(ListResponse):
    data: list[ExternalAccount]


# ---------------------------------------------------------------------------
# Persons
# ---------------------------------------------------------------------------


class DateOfBirth(BaseModel):
    day: int | None = None
    month: int | None = None
    year: int | None = None


class PersonRelationship(BaseModel):
    director: bool | None = None
    executive: bool | None = None
    owner: bool | None = None
    percent_ownership: float | None = None
    representative: bool | None = None
    title: str | None = None


class PersonRequirements(BaseModel):
    currently_due: list[str] = []
    eventually_due: list[str] = []
    past_due: list[str] = []
    pending_verification: list[str] = []


class PersonVerification(BaseModel):
    additional_document: VerificationDocument | None = None
    details: str | None = None
    details_code: str | None = None
    document: VerificationDocument | None = None
    status: str | None = None


class Person(BaseModel):
    id: str
    object: Literal["person"] = "person"
    account: str
    address: Address | None = None
    address_kana: JapanAddress | None = None
    address_kanji: JapanAddress | None = None
    created: Timestamp
    dob: DateOfBirth | None = None
    email: str | None = None
    first_name: str | None = None
    first_name_kana: str | None = None
    first_name_kanji: str | None = None
    gender: str | None = None
    id_number_provided: bool | None = None
    last_name: str | None = None
    last_name_kana: str | None = None
    last_name_kanji: str | None = None
    maiden_name: str | None = None
    metadata: Metadata = {}
    phone: str | None = None
    relationship: PersonRelationship | None = None
    requirements: PersonRequirements | None = None
    ssn_last_4_provided: bool | None = None
    verification: PersonVerification | None = None


class DeletedPerson(DeletedObject):
    object: Literal["person"] = "person"


class PersonListResponse(ListResponse):
    data: list[Person]


# ---------------------------------------------------------------------------
# Capabilities and login links
# ---------------------------------------------------------------------------


class CapabilityRequirements(BaseModel):
    current_deadline: Timestamp | None = None
    currently_due: list[str] = []
    disabled_reason: str | None = None
    eventually_due: list[str] = []
    past_due: list[str] = []
    pending_verification: list[str] = []


class Capability(BaseModel):
    id: str
    object: Literal["capability"] = "capability"
    account: str | ExpandedObject
    requested: bool
    requested_at: Timestamp | None = None
    requirements: CapabilityRequirements | None = None
    status: Literal["active", "disabled", "inactive", "pending", "unrequested"]


class CapabilityListResponse(ListResponse):
    data: list[Capability]


class LoginLink(BaseModel):
    object: Literal["login_link"] = "login_link"
    created: Timestamp
    url: str


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class BusinessProfile(BaseModel):
    mcc: str | None = None
    name: str | None = None
    product_description: str | None = None
    support_address: Address | None = None
    support_email: str | None = None
    support_phone: str | None = None
    support_url: str | None = None
    url: str | None = None


class AccountCapabilities(BaseModel):
    card_issuing: CapabilityState | None = None
    card_payments: CapabilityState | None = None
    legacy_payments: CapabilityState | None = None
    transfers: CapabilityState | None = None


class CompanyVerification(BaseModel):
    document: VerificationDocument


class Company(BaseModel):
    address: Address | None = None
    address_kana: JapanAddress | None = None
    address_kanji: JapanAddress | None = None
    directors_provided: bool = False
    name: str | None = None
    name_kana: str | None = None
    name_kanji: str | None = None
    owners_provided: bool = False
    phone: str | None = None
    tax_id_provided: bool | None = None
    tax_id_registrar: str | None = None
    vat_id_provided: bool | None = None
    verification: CompanyVerification | None = None


class AccountRequirements(BaseModel):
    current_deadline: Timestamp | None = None
    currently_due: list[str] | None = None
    disabled_reason: str | None = None
    eventually_due: list[str] | None = None
    past_due: list[str] | None = None
    pending_verification: list[str] | None = None


class BrandingSettings(BaseModel):
    icon: str | ExpandedObject | None = None
    logo: str | ExpandedObject | None = None
    primary_color: str | None = None


class DeclineOn(BaseModel):
    avs_failure: bool
    cvc_failure: bool


class CardPaymentsSettings(BaseModel):
    decline_on: DeclineOn | None = None
    statement_descriptor_prefix: str | None = None


class DashboardSettings(BaseModel):
    display_name: str | None = None
    timezone: str | None = None


class PaymentsSettings(BaseModel):
    statement_descriptor: str | None = None
    statement_descriptor_kana: str | None = None
    statement_descriptor_kanji: str | None = None


class PayoutSchedule(BaseModel):
    delay_days: int
    interval: str
    monthly_anchor: int | None = None
    weekly_anchor: str | None = None


class PayoutsSettings(BaseModel):
    debit_negative_balances: bool
    schedule: PayoutSchedule
    statement_descriptor: str | None = None


class AccountSettings(BaseModel):
    branding: BrandingSettings
    card_payments: CardPaymentsSettings
    dashboard: DashboardSettings
    payments: PaymentsSettings
    payouts: PayoutsSettings | None = None


class TosAcceptance(BaseModel):
    date: Timestamp | None = None
    ip: str | None = None
    user_agent: str | None = None


class Account(BaseModel):
    """A Stripe account: the platform itself or one of its connected accounts."""

    id: Annotated[str, Field(description="Unique identifier for the object.")]
    object: Annotated[
        Literal["account"],
        Field(description="String representing the object's type. Always 'account'."),
    ] = "account"
    business_profile: Annotated[
        BusinessProfile | None,
        Field(description="Business information about the account."),
    ] = None
    business_type: Annotated[
        str | None, Field(description="The business type.")
    ] = None
    capabilities: AccountCapabilities = AccountCapabilities()
    charges_enabled: Annotated[
        bool, Field(description="Whether the account can create live charges.")
    ] = False
    company: Company | None = None
    country: Annotated[
        str | None, Field(description="The account's country.")
    ] = None
    created: Annotated[
        Timestamp | None,
        Field(
            description="Time at which the object was created. Measured in seconds since the Unix epoch."
        ),
    ] = None
    default_currency: Annotated[
        str | None,
        Field(
            description="Three-letter ISO currency code representing the default currency for the account."
        ),
    ] = None
    details_submitted: Annotated[
        bool,
        Field(description="Whether account details have been submitted."),
    ] = False
    email: Annotated[
        str | None, Field(description="The primary user's email address.")
    ] = None
    external_accounts: Annotated[
        ExternalAccountListResponse | None,
        Field(
            description="External accounts (bank accounts and debit cards) currently attached to this account."
        ),
    ] = None
    individual: Person | None = None
    livemode: bool | None = None
    metadata: Annotated[
        Metadata,
        Field(
            description="Set of key-value pairs that you can attach to an object."
        ),
    ] = {}
    payouts_enabled: Annotated[
        bool,
        Field(description="Whether Stripe can send payouts to this account."),
    ] = False
    requirements: AccountRequirements | None = None
    settings: AccountSettings | None = None
    tos_acceptance: TosAcceptance | None = None
    type: Annotated[
        AccountType | None,
        Field(description="The Stripe account type."),
    ] = None


class DeletedAccount(DeletedObject):
    object: Literal["account"] = "account"


class AccountListResponse(ListResponse):
    data: list[Account]


# ---------------------------------------------------------------------------
# Request parameters
# ---------------------------------------------------------------------------


class BusinessProfileParams(StripeParams):
    mcc: str | None = None
    name: str | None = None
    product_description: str | None = None
    support_email: str | None = None
    support_phone: str | None = None
    support_url: str | None = None
    url: str | None = None


class CompanyVerificationParams(StripeParams):
    document: DocumentParams | None = None


class CompanyParams(StripeParams):
    address: AddressParams | None = None
    address_kana: JapanAddressParams | None = None
    address_kanji: JapanAddressParams | None = None
    directors_provided: bool | None = None
    name: str | None = None
    name_kana: str | None = None
    name_kanji: str | None = None
    owners_provided: bool | None = None
    phone: str | None = None
    tax_id: str | None = None
    tax_id_registrar: str | None = None
    vat_id: str | None = None
    verification: CompanyVerificationParams | None = None


class DateOfBirthParams(StripeParams):
    day: int
    month: int
    year: int


class PersonVerificationParams(StripeParams):
    additional_document: DocumentParams | None = None
    document: DocumentParams | None = None


class IndividualParams(StripeParams):
    address: AddressParams | None = None
    address_kana: JapanAddressParams | None = None
    address_kanji: JapanAddressParams | None = None
    dob: DateOfBirthParams | Empty | None = None
    email: str | None = None
    first_name: str | None = None
    first_name_kana: str | None = None
    first_name_kanji: str | None = None
    gender: str | None = None
    id_number: str | None = None
    last_name: str | None = None
    last_name_kana: str | None = None
    last_name_kanji: str | None = None
    maiden_name: str | None = None
    metadata: Metadata | None = None
    phone: str | None = None
    ssn_last_4: str | None = None
    verification: PersonVerificationParams | None = None


class BrandingParams(StripeParams):
    icon: str | None = None
    logo: str | None = None
    primary_color: str | None = None


class DeclineOnParams(StripeParams):
    avs_failure: bool | None = None
    cvc_failure: bool | None = None


class CardPaymentsParams(StripeParams):
    decline_on: DeclineOnParams | None = None
    statement_descriptor_prefix: str | None = None


class PaymentsParams(StripeParams):
    statement_descriptor: str | None = None
    statement_descriptor_kana: str | None = None
    statement_descriptor_kanji: str | None = None


class PayoutScheduleParams(StripeParams):
    delay_days: Literal["minimum"] | int | None = None
    interval: PayoutInterval | None = None
    monthly_anchor: int | None = None
    weekly_anchor: Weekday | None = None


class PayoutsParams(StripeParams):
    debit_negative_balances: bool | None = None
    schedule: PayoutScheduleParams | None = None
    statement_descriptor: str | None = None


class SettingsParams(StripeParams):
    branding: BrandingParams | None = None
    card_payments: CardPaymentsParams | None = None
    payments: PaymentsParams | None = None
    payouts: PayoutsParams | None = None


class TosAcceptanceParams(StripeParams):
    date: int | None = None
    ip: str | None = None
    user_agent: str | None = None


class AccountUpdateParams(ExpandableParams):
    account_token: str | None = None
    business_profile: BusinessProfileParams | None = None
    business_type: str | None = None
    company: CompanyParams | None = None
    default_currency: str | None = None
    email: str | None = None
    external_account: str | None = None
    individual: IndividualParams | None = None
    metadata: Metadata | None = None
    requested_capabilities: list[CapabilityName] | None = None
    settings: SettingsParams | None = None
    tos_acceptance: TosAcceptanceParams | None = None


class AccountCreateParams(AccountUpdateParams):
    country: str | None = None
    type: AccountType | None = None


class AccountDeleteParams(StripeParams):
    pass


class AccountListParams(ListParams):
    created: RangeQuery | int | None = None


class AccountRejectParams(ExpandableParams):
    reason: Annotated[
        str,
        Field(
            description="The reason for rejecting the account. Can be `fraud`, `terms_of_service`, or `other`."
        ),
    ]


class AccountRetrieveParams(ExpandableParams):
    pass


class AccountListCapabilitiesParams(ExpandableParams):
    pass


class AccountRetrieveCapabilityParams(ExpandableParams):
    pass


class AccountUpdateCapabilityParams(ExpandableParams):
    requested: bool | None = None


class AccountCreateExternalAccountParams(ExpandableParams):
    default_for_currency: bool | None = None
    external_account: str
    metadata: Metadata | None = None


class AccountDeleteExternalAccountParams(StripeParams):
    pass


class AccountListExternalAccountsParams(ListParams):
    pass


class AccountRetrieveExternalAccountParams(ExpandableParams):
    pass


class AccountUpdateExternalAccountParams(ExpandableParams):
    account_holder_name: str | None = None
    account_holder_type: Literal["", "company", "individual"] | None = None
    address_city: str | None = None
    address_country: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    default_for_currency: bool | None = None
    exp_month: str | None = None
    exp_year: str | None = None
    metadata: Metadata | None = None
    name: str | None = None


class AccountCreateLoginLinkParams(ExpandableParams):
    redirect_url: str | None = None


class RelationshipParams(StripeParams):
    director: bool | None = None
    executive: bool | None = None
    owner: bool | None = None
    percent_ownership: float | Empty | None = None
    representative: bool | None = None
    title: str | None = None


class AccountUpdatePersonParams(IndividualParams):
    expand: list[str] | None = None
    person_token: str | None = None
    relationship: RelationshipParams | None = None


class AccountCreatePersonParams(AccountUpdatePersonParams):
    pass


class AccountDeletePersonParams(StripeParams):
    pass


class RelationshipFilter(StripeParams):
    director: bool | None = None
    executive: bool | None = None
    owner: bool | None = None
    representative: bool | None = None


class AccountListPersonsParams(ListParams):
    relationship: RelationshipFilter | None = None


class AccountRetrievePersonParams(ExpandableParams):
    pass


__all__ = [
    "CapabilityName",
    "CapabilityState",
    "AccountType",
    "BankAccount",
    "Card",
    "DeletedBankAccount",
    "DeletedCard",
    "ExternalAccount",
    "DeletedExternalAccount",
    "ExternalAccountListResponse",
    "DateOfBirth",
    "PersonRelationship",
    "PersonRequirements",
    "PersonVerification",
    "Person",
    "DeletedPerson",
    "PersonListResponse",
    "CapabilityRequirements",
    "Capability",
    "CapabilityListResponse",
    "LoginLink",
    "BusinessProfile",
    "AccountCapabilities",
    "Company",
    "AccountRequirements",
    "AccountSettings",
    "TosAcceptance",
    "Account",
    "DeletedAccount",
    "AccountListResponse",
    "BusinessProfileParams",
    "CompanyParams",
    "DateOfBirthParams",
    "IndividualParams",
    "SettingsParams",
    "PayoutScheduleParams",
    "TosAcceptanceParams",
    "AccountCreateParams",
    "AccountUpdateParams",
    "AccountDeleteParams",
    "AccountListParams",
    "AccountRejectParams",
    "AccountRetrieveParams",
    "AccountListCapabilitiesParams",
    "AccountRetrieveCapabilityParams",
    "AccountUpdateCapabilityParams",
    "AccountCreateExternalAccountParams",
    "AccountDeleteExternalAccountParams",
    "AccountListExternalAccountsParams",
    "AccountRetrieveExternalAccountParams",
    "AccountUpdateExternalAccountParams",
    "AccountCreateLoginLinkParams",
    "RelationshipParams",
    "AccountCreatePersonParams",
    "AccountUpdatePersonParams",
    "AccountDeletePersonParams",
    "RelationshipFilter",
    "AccountListPersonsParams",
    "AccountRetrievePersonParams",
]
