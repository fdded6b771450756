"""
Pydantic schemas for the customer portal.

Attribute names are snake_case; the JSON wire format uses the camelCase
aliases the portal front end expects.
"""
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class PolicyStatus(str, Enum):
    """Lifecycle states of an insurance policy."""
    ACTIVE = "active"
    PENDING = "pending"
    EXPIRED = "expired"


class PaymentStatus(str, Enum):
    """Settlement states of a premium payment."""
    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class ClaimStatus(str, Enum):
    """Review states of a claim."""
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class ContactPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PortalModel(BaseModel):
    """Base model that accepts both field names and camelCase aliases."""

    class Config:
        populate_by_name = True

    def to_wire(self) -> dict:
        """Dump to a JSON-safe dict keyed by the camelCase aliases."""
        return self.model_dump(by_alias=True, mode="json")


class Policy(PortalModel):
    """Schema for an insurance policy fixture."""
    id: str = Field(..., description="Policy identifier")
    type: str = Field(..., description="Line of business, e.g. Auto Insurance")
    coverage: str = Field(..., description="Coverage description")
    premium: float = Field(..., ge=0, description="Annual premium in USD")
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    status: PolicyStatus
    policy_number: str = Field(..., alias="policyNumber")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "1",
                "type": "Auto Insurance",
                "coverage": "Comprehensive Coverage",
                "premium": 1200,
                "startDate": "2024-01-01",
                "endDate": "2024-12-31",
                "status": "active",
                "policyNumber": "AUTO-2024-001",
            }
        }


class Payment(PortalModel):
    """Schema for a historical premium payment."""
    id: str
    policy_id: str = Field(..., alias="policyId", description="Weak reference to a policy")
    amount: float = Field(..., ge=0)
    payment_date: date = Field(..., alias="date")
    method: str
    status: PaymentStatus
    receipt_url: str = Field(..., alias="receiptUrl")


class Claim(PortalModel):
    """Schema for a historical claim."""
    id: str
    policy_id: str = Field(..., alias="policyId", description="Weak reference to a policy")
    description: str
    amount: float = Field(..., ge=0)
    submission_date: date = Field(..., alias="submissionDate")
    status: ClaimStatus
    documents: List[str] = Field(default_factory=list)


class User(PortalModel):
    """A portal user. Only ever fabricated, never looked up."""
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


class FAQItem(PortalModel):
    question: str
    answer: str


class LoginRequest(PortalModel):
    email: str = Field(..., min_length=1)
    password: str


class SignupRequest(PortalModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None


class ChatRequest(PortalModel):
    message: str = ""


class ChatResponse(PortalModel):
    reply: str


class ContactRequest(PortalModel):
    subject: str = ""
    message: str = ""
    priority: ContactPriority = ContactPriority.MEDIUM


class ContactInfo(PortalModel):
    claims_hotline: str = Field(..., alias="claimsHotline")
    email: str


class ClaimSubmission(PortalModel):
    """Fabricated confirmation returned for an accepted claim."""
    success: bool = True
    claim_id: str = Field(..., alias="claimId")
    claim_number: str = Field(..., alias="claimNumber")
    policy_id: str = Field(..., alias="policyId")
    status: ClaimStatus = ClaimStatus.SUBMITTED
    description: str
    incident_date: str = Field(..., alias="incidentDate")
    estimated_amount: float = Field(..., alias="estimatedAmount")
    submission_date: str = Field(..., alias="submissionDate")
    documents: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(..., alias="nextSteps")
    estimated_processing_time: str = Field(..., alias="estimatedProcessingTime")
    contact_info: ContactInfo = Field(..., alias="contactInfo")
    message: str = "Claim submitted successfully"


class PaymentConfirmation(PortalModel):
    """Fabricated confirmation returned for an accepted payment."""
    success: bool = True
    payment_id: str = Field(..., alias="paymentId")
    transaction_id: str = Field(..., alias="transactionId")
    amount: float
    currency: str = "USD"
    policy_id: str = Field(..., alias="policyId")
    payment_method: str = Field(..., alias="paymentMethod")
    status: PaymentStatus = PaymentStatus.COMPLETED
    processed_at: str = Field(..., alias="processedAt")
    receipt_url: str = Field(..., alias="receiptUrl")
    message: str = "Payment processed successfully"


class DashboardSummary(PortalModel):
    active_policies: int = Field(..., alias="activePolicies")
    pending_policies: int = Field(..., alias="pendingPolicies")
    total_annual_premium: float = Field(..., alias="totalAnnualPremium")
    total_annual_premium_display: str = Field(..., alias="totalAnnualPremiumDisplay")


class ClaimProgressStep(PortalModel):
    label: str
    completed: bool


class ClaimHistoryEntry(PortalModel):
    claim: Claim
    policy_number: Optional[str] = Field(None, alias="policyNumber")
    policy_type: Optional[str] = Field(None, alias="policyType")
    progress: int = Field(..., ge=0, le=100)
    steps: List[ClaimProgressStep]


class PaymentHistoryEntry(PortalModel):
    payment: Payment
    policy_number: Optional[str] = Field(None, alias="policyNumber")
    policy_type: Optional[str] = Field(None, alias="policyType")
