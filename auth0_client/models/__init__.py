"""Typed Auth0 resource models and request payloads."""
from __future__ import annotations

from .authentication import (
    AccessTokenRequest,
    AuthenticationRequest,
    ChangePasswordRequest,
    DelegationRequest,
    ExchangeCodeRequest,
    ImpersonationRequest,
    PasswordlessEmailRequest,
    PasswordlessEmailRequestType,
    PasswordlessEmailResponse,
    PasswordlessSmsRequest,
    PasswordlessSmsResponse,
    SignupUserRequest,
    SignupUserResponse,
    UnlinkUserRequest,
)
from .base import (
    ZERO_TIME,
    Auth0Model,
    Auth0Request,
    PagedList,
    Timestamp,
    deserialize,
    deserialize_list,
    format_timestamp,
)
from .client import Client, ClientCreateRequest, ClientUpdateRequest
from .connection import Connection, ConnectionCreateRequest, ConnectionUpdateRequest
from .device_credential import DeviceCredential, DeviceCredentialCreateRequest
from .rule import Rule, RuleCreateRequest, RuleUpdateRequest
from .ticket import EmailVerificationTicketRequest, PasswordChangeTicketRequest, Ticket
from .token import AccessToken, AuthenticationResponse, BlacklistedToken, BlacklistedTokenCreateRequest
from .user import (
    Identity,
    PagingInformation,
    User,
    UserAccountLinkRequest,
    UserCreateRequest,
    UserProfile,
    UserUpdateRequest,
)

__all__ = [
    "ZERO_TIME",
    "Auth0Model",
    "Auth0Request",
    "PagedList",
    "Timestamp",
    "deserialize",
    "deserialize_list",
    "format_timestamp",
    # Users
    "Identity",
    "PagingInformation",
    "User",
    "UserAccountLinkRequest",
    "UserCreateRequest",
    "UserProfile",
    "UserUpdateRequest",
    # Clients and connections
    "Client",
    "ClientCreateRequest",
    "ClientUpdateRequest",
    "Connection",
    "ConnectionCreateRequest",
    "ConnectionUpdateRequest",
    # Tokens
    "AccessToken",
    "AuthenticationResponse",
    "BlacklistedToken",
    "BlacklistedTokenCreateRequest",
    # Device credentials, rules, tickets
    "DeviceCredential",
    "DeviceCredentialCreateRequest",
    "Rule",
    "RuleCreateRequest",
    "RuleUpdateRequest",
    "EmailVerificationTicketRequest",
    "PasswordChangeTicketRequest",
    "Ticket",
    # Authentication API
    "AccessTokenRequest",
    "AuthenticationRequest",
    "ChangePasswordRequest",
    "DelegationRequest",
    "ExchangeCodeRequest",
    "ImpersonationRequest",
    "PasswordlessEmailRequest",
    "PasswordlessEmailRequestType",
    "PasswordlessEmailResponse",
    "PasswordlessSmsRequest",
    "PasswordlessSmsResponse",
    "SignupUserRequest",
    "SignupUserResponse",
    "UnlinkUserRequest",
]
