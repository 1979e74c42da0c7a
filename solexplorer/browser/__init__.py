"""
Contract Browser

Interactive terminal explorer over a ContractRegistry.
"""
