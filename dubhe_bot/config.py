DUBHE_PACKAGE = '0xa6477a6bf50e2389383b34a76d59ccfbec766ff2decefe38e1d8436ef8a9b245'

CONTRACTS = {
    'wrap': f'{DUBHE_PACKAGE}::dubhe_wrapper_system::wrap',
    'swap': f'{DUBHE_PACKAGE}::dubhe_dex_system::swap_exact_tokens_for_tokens',
    'add_liquidity': f'{DUBHE_PACKAGE}::dubhe_dex_system::add_liquidity',
    'shared_object': '0x8ece4cb6de126eb5c7a375f90c221bdc16c81ad8f6f894af08e0b6c25fb50a45',
    'sui_type': '0x2::sui::SUI',
}

# asset ids registered in the dubhe dex
ASSETS = {
    'wSUI': 0,
    'wDUBHE': 1,
    'wSTARS': 3,
}

PATHS = {
    'wSUI_wDUBHE': (ASSETS['wSUI'], ASSETS['wDUBHE']),
    'wDUBHE_wSUI': (ASSETS['wDUBHE'], ASSETS['wSUI']),
    'wSUI_wSTARS': (ASSETS['wSUI'], ASSETS['wSTARS']),
    'wSTARS_wSUI': (ASSETS['wSTARS'], ASSETS['wSUI']),
}

RPCS = {
    'testnet': 'https://fullnode.testnet.sui.io:443',
    'devnet': 'https://fullnode.devnet.sui.io:443',
    'mainnet': 'https://fullnode.mainnet.sui.io:443',
}

EXPLORER = 'https://testnet.suivision.xyz/txblock/'

PRIVATE_KEY_PREFIX = 'PRIVATE_KEY_'
MNEMONIC_PREFIX = 'MNEMONIC_'

SUI_DERIVATION_PATH = "m/44'/784'/0'/0'/0'"
