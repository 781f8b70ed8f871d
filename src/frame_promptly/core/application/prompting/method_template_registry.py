from __future__ import annotations

from types import MappingProxyType

from frame_promptly.core.domain.prompt import PromptingMethod

METHOD_TEMPLATES: MappingProxyType[PromptingMethod, str] = MappingProxyType(
    {
        PromptingMethod.ZERO_SHOT: (
            "{systemPrompt}\n\n"
            "Task: {task}\n\n"
            "{context}\n\n"
            "{userInput}\n\n"
            "Please provide a comprehensive response."
        ),
        PromptingMethod.FEW_SHOT: (
            "{systemPrompt}\n\n"
            "Task: {task}\n\n"
            "Here are some examples:\n\n"
            "{examples}\n\n"
            "{context}\n\n"
            "Now for your task:\n"
            "{userInput}\n\n"
            "Please follow the pattern shown in the examples."
        ),
        PromptingMethod.CHAIN_OF_THOUGHT: (
            "{systemPrompt}\n\n"
            "Task: {task}\n\n"
            "{context}\n\n"
            "{userInput}\n\n"
            "Let's approach this step by step:\n"
            "1. First, I'll analyze the problem\n"
            "2. Then, I'll consider the options\n"
            "3. Finally, I'll provide a detailed solution\n\n"
            "Please work through this systematically."
        ),
        PromptingMethod.INSTRUCTION_TUNING: (
            "{systemPrompt}\n\n"
            "You are an expert UX professional. Follow these specific instructions:\n\n"
            "{instructions}\n\n"
            "Context: {context}\n\n"
            "Task: {task}\n\n"
            "Input: {userInput}\n\n"
            "Please follow the instructions precisely and provide detailed output."
        ),
        PromptingMethod.ROLE_PLAYING: (
            "{systemPrompt}\n\n"
            "You are a {role}. You have {expertise} and your approach is {style}.\n\n"
            "Context: {context}\n\n"
            "Task: {task}\n\n"
            "Input: {userInput}\n\n"
            "Respond as the {role} would, drawing on their expertise and approach."
        ),
        PromptingMethod.STEP_BY_STEP: (
            "{systemPrompt}\n\n"
            "Task: {task}\n\n"
            "{context}\n\n"
            "{userInput}\n\n"
            "Please break this down into clear steps:\n\n"
            "Step 1: [Analysis]\n"
            "Step 2: [Planning]\n"
            "Step 3: [Execution]\n"
            "Step 4: [Validation]\n\n"
            "Provide detailed guidance for each step."
        ),
    }
)


def get_template(method: str | PromptingMethod) -> str:
    """Skeleton for ``method``; raises UnknownMethodError outside the six supported ids."""
    return METHOD_TEMPLATES[PromptingMethod.parse(method)]
