"""Prompt builders — one pure function per insight intent.

Builders only interpolate record fields and caller text into fixed
templates.  Free text from citizens is embedded verbatim.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from transparentgov.models.audit import AuditRecord
from transparentgov.models.insight import Intent


@dataclass(frozen=True)
class PolicyProposal:
    """A hypothetical public AI system described in the policy sandbox."""

    goal: str
    data_points: str
    target_population: str

    def is_complete(self) -> bool:
        return all(
            field.strip() for field in (self.goal, self.data_points, self.target_population)
        )


def summary_prompt(record: AuditRecord) -> str:
    bias = record.bias_details
    return (
        "Explain the following AI bias report in simple, plain language for a "
        "citizen who is not a tech expert. Focus on the real-world impact. Report:\n"
        f"- AI System: {record.name}\n"
        f"- Bias Finding: {bias.impact}\n"
        f"- Monitored Group: {bias.demographic}\n"
        f"- Unfair Outcome: {bias.disparity}"
    )


def mitigation_prompt(record: AuditRecord) -> str:
    bias = record.bias_details
    return (
        "As a policy and AI ethics expert, suggest 3-4 actionable mitigation "
        "strategies for the government agency to address the following AI bias. "
        "For each suggestion, briefly explain how it would help.\n"
        f"- AI System: {record.name} by {record.agency}\n"
        f"- Bias Finding: {bias.impact}\n"
        f"- Monitored Group: {bias.demographic}\n"
        f"- Unfair Outcome: {bias.disparity}"
    )


def root_cause_prompt(record: AuditRecord) -> str:
    return (
        "You are an expert investigative data scientist and AI ethicist. Based on "
        "the provided audit report, hypothesize the most likely root causes for the "
        "identified bias. Consider factors like data collection, feature engineering, "
        "historical biases, and proxy variables. Present your findings as a list of "
        "2-3 likely hypotheses, each with a brief explanation.\n\n"
        "**Audit Report Details:**\n"
        f"- AI System: {record.name}\n"
        f"- Agency: {record.agency}\n"
        f"- Bias Finding: {record.bias_details.impact}\n"
        f"- Key Decision Factors: {record.decision_factors()}\n\n"
        "Based on this information, what are the probable root causes of this bias?"
    )


def fairness_simulation_prompt(record: AuditRecord) -> str:
    return (
        "You are a hopeful and creative writer. Based on the following AI audit "
        'report, write a short, positive, narrative paragraph describing what a '
        '"fairer future" might look like if the identified bias was successfully '
        "corrected. Focus on the positive human impact.\n\n"
        "**Audit Report Details:**\n"
        f"- AI System: {record.name}\n"
        f"- Key Bias Finding: {record.bias_details.impact}\n"
        f"- The bias is against: {record.bias_details.disparity}.\n\n"
        "Describe a scene or a short story where this is no longer an issue. For "
        "example, what new opportunities are unlocked for people? How has community "
        "life improved?"
    )


def personal_impact_prompt(record: AuditRecord, profile: str) -> str:
    bias = record.bias_details
    return (
        "You are an impartial AI bias analyst. A citizen has provided their "
        "anonymous profile to understand how a specific government AI system might "
        "impact them. Your task is to analyze their profile against the known biases "
        "in the audit report. Frame your response carefully as a *potential* impact "
        "analysis, not a definitive outcome. Be clear, direct, and empathetic.\n\n"
        "**Audit Report Details:**\n"
        f"- AI System: {record.name}\n"
        f"- Key Bias Finding: {bias.impact}\n"
        f"- The bias is related to: {bias.demographic} and {bias.disparity}.\n\n"
        "**Citizen's Anonymous Profile:**\n"
        f'"{profile}"\n\n'
        "Based on this, analyze and explain the potential impact. If the user's "
        "profile matches the known biased demographic, explain the risk clearly. If "
        "it doesn't, explain why their risk might be lower according to this specific "
        'audit finding. Start your response with "Based on your profile, here is a '
        'potential impact analysis:".'
    )


def citizen_query_prompt(record: AuditRecord, question: str) -> str:
    return (
        "You are an AI ethics auditor explaining a complex topic to a concerned "
        "citizen. Use clear, simple, and respectful language. Do not make up "
        "information beyond what is provided in the report.\n\n"
        "Here is the audit report:\n"
        f"- AI System: {record.name}\n"
        f"- Agency: {record.agency}\n"
        f"- Description: {record.description}\n"
        f"- Bias Finding: {record.bias_details.impact}\n"
        f"- Key Decision Factors: {record.decision_factors()}\n\n"
        f'Here is the citizen\'s question: "{question}"\n\n'
        "Based ONLY on the audit report provided, answer the citizen's question. If "
        "the report directly addresses their concern, explain how. If the report does "
        "not have enough information to answer directly, state that clearly and "
        "explain what kind of data would be needed to investigate their specific "
        "concern."
    )


def inquiry_draft_prompt(record: AuditRecord) -> str:
    return (
        "Draft a formal but clear letter of inquiry from a concerned citizen to a "
        "government agency regarding a biased AI system. The tone should be "
        "respectful but firm. The letter should:\n"
        "1. State the purpose of the inquiry clearly.\n"
        "2. Reference the specific AI system and the public audit report.\n"
        "3. Briefly state the key finding of the bias.\n"
        "4. Ask what steps the agency is taking to address and rectify this bias.\n"
        "5. Request a timeline for the agency's response.\n\n"
        "Use the following details:\n"
        f"- AI System Name: {record.name}\n"
        f"- Government Agency: {record.agency}\n"
        f'- Audit Finding: "{record.bias_details.impact}"\n'
        "- Placeholder for Citizen's Name and Address."
    )


def trend_findings(records: Sequence[AuditRecord]) -> str:
    """One bullet line per record: ``- <name>, <agency>: <impact>``."""
    return "\n".join(
        f"- {r.name}, {r.agency}: {r.bias_details.impact}" for r in records
    )


def trend_analysis_prompt(records: Sequence[AuditRecord]) -> str:
    return (
        "You are a government oversight analyst specializing in technology ethics. "
        "Below is a summary of findings from several independent AI audits across "
        "different government agencies. Please analyze this summary to identify "
        "high-level, systemic trends.\n\n"
        "Your analysis should look for:\n"
        "1.  **Recurring Bias Types:** Are there common themes like geographic, "
        "socio-economic, or other forms of bias appearing across multiple systems?\n"
        "2.  **Problematic Agencies:** Does one agency appear more frequently with "
        "biased systems?\n"
        "3.  **Systemic Risks:** Based on the trends, what is the biggest systemic "
        "risk to citizens from the government's current use of AI?\n\n"
        "Provide a concise, high-level report of your findings.\n\n"
        "**Consolidated Audit Findings:**\n"
        f"{trend_findings(records)}"
    )


def _comparison_profile(label: str, record: AuditRecord) -> str:
    return (
        f"**{label}:**\n"
        f"- System: {record.name}\n"
        f"- Agency: {record.agency}\n"
        f"- Fairness Score: {record.fairness_score}\n"
        f"- Bias Finding: {record.bias_details.impact}"
    )


def comparison_prompt(first: AuditRecord, second: AuditRecord) -> str:
    return (
        "You are an expert AI ethics and policy analyst. Conduct a comparative "
        "analysis of the following two government AI audit reports.\n\n"
        f"{_comparison_profile('Report 1', first)}\n\n"
        f"{_comparison_profile('Report 2', second)}\n\n"
        "Please provide a concise comparison covering the following points:\n"
        "1.  **Severity:** Which system appears to have a more severe or impactful "
        "bias? Why?\n"
        "2.  **Commonality:** Is there a common theme in the type of bias (e.g., are "
        "both geographic, socio-economic, etc.)?\n"
        "3.  **Performance:** How do their fairness scores compare and what does "
        "this imply?\n"
        "4.  **Conclusion:** Briefly summarize the key difference or similarity a "
        "policymaker should be aware of."
    )


def remediation_prompt(record: AuditRecord, strategy: str) -> str:
    return (
        "You are an AI ethics simulator. A user wants to test a potential fix for a "
        "known bias in a government AI system. Analyze their proposed solution and "
        'provide a "Pros and Cons" report.\n\n'
        "**Original System Audit:**\n"
        f"- **System:** {record.name}\n"
        f"- **Agency:** {record.agency}\n"
        f"- **Known Bias:** {record.bias_details.impact}\n\n"
        "**User's Proposed Remediation Strategy:**\n"
        f'"{strategy}"\n\n'
        "**Your Task:**\n"
        "Generate a simulation report with the following sections:\n"
        "1.  **Potential Benefits:** How might this strategy successfully reduce the "
        "original bias? Be specific.\n"
        "2.  **Potential Unintended Consequences:** What new biases or problems could "
        "this strategy accidentally create? Think about second-order effects. (e.g., "
        "Could it disadvantage a different group? Could it be easy to game the "
        "system?).\n"
        "3.  **Overall Assessment:** Provide a concluding thought on the viability of "
        "this strategy. Is it a promising direction, or does it introduce more risk "
        "than it solves?"
    )


def policy_risk_prompt(proposal: PolicyProposal) -> str:
    return (
        "You are a world-class AI ethics and public policy consultant. A government "
        "body is proposing a new AI system and has asked you to perform a "
        "pre-emptive bias and risk analysis.\n\n"
        "**Proposed AI System Details:**\n"
        f"- **Policy Goal:** {proposal.goal}\n"
        f"- **Proposed Data Points for Decision-Making:** {proposal.data_points}\n"
        f"- **Target Population:** {proposal.target_population}\n\n"
        "**Your Task:**\n"
        'Generate a "Pre-emptive Bias and Risk Report". Your report should be '
        "structured into the following sections:\n"
        "1.  **Potential Bias Risks:** Based on the proposed data points and target "
        "population, what are the most significant risks for introducing or "
        "perpetuating bias? (e.g., risk of proxy discrimination, historical bias in "
        "data, unrepresentative data).\n"
        "2.  **Data-Driven Recommendations:** What additional data points could be "
        "included to make the model fairer and more robust? What existing data points "
        "are most risky?\n"
        "3.  **Ethical Implementation Guidelines:** Provide 2-3 key recommendations "
        "for the government agency to follow during the development and deployment "
        "of this AI to ensure fairness and accountability.\n\n"
        "Your tone should be constructive and advisory."
    )


_SINGLE_RECORD_BUILDERS = {
    Intent.SUMMARY: summary_prompt,
    Intent.MITIGATION: mitigation_prompt,
    Intent.ROOT_CAUSE: root_cause_prompt,
    Intent.FAIRNESS_SIMULATION: fairness_simulation_prompt,
    Intent.INQUIRY_DRAFT: inquiry_draft_prompt,
}

_TEXT_BUILDERS = {
    Intent.PERSONAL_IMPACT: personal_impact_prompt,
    Intent.CITIZEN_QUERY: citizen_query_prompt,
    Intent.REMEDIATION_SIMULATION: remediation_prompt,
}


def build_prompt(
    intent: Intent, records: Sequence[AuditRecord], user_text: str | None = None
) -> str:
    """Dispatch to the builder for ``intent``.

    ``records`` holds one record for single-record intents, two for a
    comparison and the flagged subset for trend analysis.
    """
    if intent is Intent.TREND_ANALYSIS:
        return trend_analysis_prompt(records)
    if intent is Intent.COMPARISON:
        if len(records) != 2:
            raise ValueError(f"Comparison needs exactly 2 records, got {len(records)}")
        return comparison_prompt(records[0], records[1])
    if intent is Intent.POLICY_RISK:
        raise ValueError("Policy risk prompts are built from a PolicyProposal")

    if len(records) != 1:
        raise ValueError(f"{intent.value} needs exactly 1 record, got {len(records)}")
    if intent in _TEXT_BUILDERS:
        return _TEXT_BUILDERS[intent](records[0], user_text or "")
    return _SINGLE_RECORD_BUILDERS[intent](records[0])
