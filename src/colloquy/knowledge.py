# src/colloquy/knowledge.py
"""Built-in wealth-management operations knowledge and the Max persona."""

from colloquy.cases import CaseBook, ClientCase
from colloquy.loaders import facts_to_sources
from colloquy.models import RecordSource, Source
from colloquy.persona import Persona

OPERATIONS_FACTS: list[str] = [
    "Q: What is S&A? A: S&A stands for Service & Administration. It handles centralized "
    "operations, client onboarding, service centers, and back-office activities including "
    "account maintenance, document processing, and operational support.",
    "Q: What is CWM? A: CWM stands for Consumer & Wealth Management. It provides mass market "
    "wealth services including investment accounts, retirement planning, and financial "
    "advisory services for retail clients.",
    "Q: What is Advisory Services? A: Advisory Services includes financial advisors and "
    "investment associates across all channels. They provide personalized financial planning, "
    "portfolio management, and investment advice to clients.",
    "Q: What is Supervision & Compliance? A: Supervision & Compliance handles regulatory "
    "oversight, trade review, surveillance, and account review to ensure all activities meet "
    "regulatory requirements and internal policies.",
    "Q: What is the client onboarding process? A: The client onboarding process includes: "
    "1) Initial consultation and needs assessment, 2) Account application and documentation "
    "collection, 3) ID verification and compliance checks, 4) Account funding and portfolio "
    "setup, 5) Welcome call and service introduction. The process typically takes 3-5 "
    "business days.",
    "Q: What happens if ID verification is delayed? A: If ID verification is delayed beyond "
    "48 hours: 1) Send automated e-ID reminders, 2) Prefill missing fields in the application, "
    "3) Notify assigned advisors, 4) Schedule follow-up tasks, 5) Monitor for SLA breaches.",
    "Q: How do I handle stalled onboarding cases? A: For stalled onboarding cases: 1) Review "
    "the specific hold reason, 2) Send targeted reminders based on missing information, "
    "3) Update CRM notes with action taken, 4) Schedule same-day follow-up tasks, 5) Escalate "
    "to supervisor if no response within 72 hours.",
    "Q: What are the key compliance requirements for client accounts? A: Key compliance "
    "requirements include: 1) Know Your Customer (KYC) verification, 2) Anti-Money Laundering "
    "(AML) screening, 3) Suitability assessments, 4) Risk tolerance evaluations, 5) Regular "
    "account reviews, 6) Transaction monitoring, 7) Regulatory reporting.",
    "Q: How do I handle compliance flags? A: For compliance flags: 1) Immediately review the "
    "flag details, 2) Assess risk level and urgency, 3) Gather additional information if "
    "needed, 4) Document findings and actions, 5) Escalate to compliance team if required, "
    "6) Update client records, 7) Monitor for resolution.",
    "Q: What is the standard response time for client inquiries? A: Standard response times "
    "are: 1) Urgent matters: 2 hours, 2) General inquiries: 24 hours, 3) Account changes: "
    "48 hours, 4) Document requests: 72 hours, 5) Complex issues: 5 business days.",
    "Q: How do I handle portfolio rebalancing alerts? A: For portfolio rebalancing alerts: "
    "1) Review current vs. target allocations, 2) Calculate required trades, 3) Check for tax "
    "implications, 4) Consider market conditions, 5) Prepare client communication, 6) Execute "
    "trades if approved, 7) Update client records.",
    "Q: What documents are required for KYC/AML? A: Required documents are a passport or ID, "
    "proof of address, tax forms (W-8BEN, FATCA) and a source of funds declaration.",
    "Q: Why is account funding delayed? A: Funding arrives by wire transfer, check deposit or "
    "internal fund transfer. Common delays are pending treasury posting and bank clearance.",
    "Q: What is the escalation path? A: Operations, then Compliance, then Manager approval, "
    "then Executive escalation for urgent SLA breaches.",
    "Q: When should I escalate a client issue? A: Escalation triggers: 1) Compliance "
    "violations or concerns, 2) Large financial losses, 3) Client complaints or threats, "
    "4) System failures affecting multiple clients, 5) Regulatory inquiries, 6) Unusual "
    "trading activity, 7) Data security incidents, 8) Legal matters or disputes.",
]

CLIENT_CASES = CaseBook(
    [
        ClientCase(
            name="John Kim",
            advisor="James Lee",
            status="ID Verification",
            pending_step="Attestation",
            responsible_person="Maria Gomez",
            sla_hours=48,
            notes="Passport uploaded, needs manager attestation",
        ),
        ClientCase(
            name="Maria Gomez",
            advisor="Laura Smith",
            status="Address Proof",
            pending_step="Verification",
            responsible_person="Anil Kapoor",
            sla_hours=36,
            notes="Utility bill submitted, pending compliance check",
        ),
        ClientCase(
            name="Michael Brown",
            advisor="David Wilson",
            status="Funding",
            pending_step="Treasury posting",
            responsible_person="Treasury Ops",
            sla_hours=72,
            notes="Wire transfer received, pending posting",
        ),
        ClientCase(
            name="Priya Mehta",
            advisor="Sophie Chen",
            status="Account Approval",
            pending_step="Compliance review",
            responsible_person="David Chen",
            sla_hours=72,
            notes="Tax residency form under review",
        ),
        ClientCase(
            name="James Wong",
            advisor="Emily Davis",
            status="Document Rejection",
            pending_step="Updated proof needed",
            responsible_person="Client",
            sla_hours=24,
            notes="Utility bill over 6 months old",
        ),
    ]
)

CLIENT_PROFILES: list[RecordSource] = [
    RecordSource(
        source_id="client-CL001",
        record={
            "id": "CL001",
            "name": "Sarah Johnson",
            "location": "New York, NY",
            "investment_style": "Moderate",
            "net_worth_tier": "High Net Worth",
            "organization": "CWM",
            "portfolio": {"total_value": 2500000, "cash": 150000, "equities": 1200000},
            "alerts": ["Portfolio rebalancing due", "Market volatility affecting tech holdings"],
        },
        field_order=("id", "name"),
    ),
    RecordSource(
        source_id="client-CL002",
        record={
            "id": "CL002",
            "name": "Michael Chen",
            "location": "San Francisco, CA",
            "investment_style": "Conservative",
            "net_worth_tier": "Ultra High Net Worth",
            "organization": "Advisory Services",
            "portfolio": {"total_value": 8500000, "cash": 500000, "bonds": 4000000},
            "alerts": ["Required minimum distribution due", "Estate planning review overdue"],
        },
        field_order=("id", "name"),
    ),
]

MAX_PERSONA = Persona(
    name="Max",
    role="HeyGen AI Wealth Management Operations Assistant",
    traits=(
        "Proactive and detail-oriented",
        "Supportive with friendly but professional tone",
        "Knowledgeable about wealth management operations",
        "Efficient problem-solver",
    ),
    rules=(
        "Always be proactive and detail-oriented",
        "Maintain a friendly but professional tone",
        "Help track onboarding progress, compliance steps, account servicing, funding, "
        "and advisor follow-ups",
        "Provide clear status updates and explain pending steps",
        "Suggest the fastest way to resolve issues",
        "Max 3 sentences per response, <30 words each",
        "Always offer next steps",
        "Avoid jargon unless the user is familiar with it",
        "Refuse off-topic or NSFW requests politely",
        "For unclear speech: 'Sorry, didn't catch that. Could you repeat?'",
    ),
    greeting=(
        "Good morning, Sarah. Several onboarding tasks are close to or past SLA. "
        "Want me to go over them and suggest the quickest way to resolve?"
    ),
    conversation_starters=(
        "Good morning, Sarah. Several onboarding tasks are close to or past SLA. "
        "Want me to go over them and suggest the quickest way to resolve?",
        "Hi Sarah, I see three client onboardings have stalled past ID verification SLA. "
        "Want me to share details?",
        "Morning, Sarah. Michael Brown's funding hasn't cleared in 72 hours. "
        "Want me to follow up?",
    ),
    fallback_message="Sorry, I'm having trouble right now. Shall I escalate this to the team?",
    farewell="Is there anything else you'd like me to check or escalate?",
)


def builtin_sources() -> list[Source]:
    """Curated facts, client cases and client profiles as ingestible sources."""
    return [
        *facts_to_sources(OPERATIONS_FACTS, prefix="ops-fact"),
        *CLIENT_CASES.to_sources(),
        *CLIENT_PROFILES,
    ]
