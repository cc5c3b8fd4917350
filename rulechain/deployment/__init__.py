"""rulechain/deployment — HTTP serving for RuleChain.

The server lives in ``rulechain.deployment.server.app``.
"""
