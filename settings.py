
NETWORK             = 'testnet'             # testnet | devnet | mainnet - which sui fullnode to use
RPC                 = ''                    # custom rpc url. leave empty to use the public fullnode of NETWORK
GAS_BUDGET          = 50_000_000            # gas budget of every transaction in MIST (0.05 SUI)
ENV_FILE            = '.env'                # file with PRIVATE_KEY_* / MNEMONIC_* wallets

DELAY_BETWEEN_TX    = 5                     # delay after every transaction and every wallet in seconds. [5, 10] - random 5-10 seconds


# --- ACTIONS ---
WRAP                = {                     # wrap SUI -> wSUI before everything else. if wrap fails - wallet is skipped till next cycle
    "enabled"               : True,
    "amount"                : 100_000_000,  # 0.1 SUI (in MIST)
    "label"                 : "Wrap wSUI",
}

SWAPS               = [                     # swaps run one by one in this order
    {
        "enabled"           : True,
        "path"              : "wSUI_wDUBHE",
        "amount"            : 100_000,
        "min_out"           : 1,            # minimal output of the swap
        "repeat"            : 1,            # how many times to repeat this swap. 0 - skip
        "label"             : "Swap wSUI -> wDUBHE",
    },
    {
        "enabled"           : True,
        "path"              : "wDUBHE_wSUI",
        "amount"            : 100_000,
        "min_out"           : 1,
        "repeat"            : 1,
        "label"             : "Swap wDUBHE -> wSUI",
    },
    {
        "enabled"           : True,
        "path"              : "wSUI_wSTARS",
        "amount"            : 100_000,
        "min_out"           : 1,
        "repeat"            : 1,
        "label"             : "Swap wSUI -> wSTARS",
    },
    {
        "enabled"           : True,
        "path"              : "wSTARS_wSUI",
        "amount"            : 100_000,
        "min_out"           : 1,
        "repeat"            : 1,
        "label"             : "Swap wSTARS -> wSUI",
    },
]

ADD_LIQUIDITY       = [                     # liquidity is added after all swaps, in this order
    {
        "enabled"           : True,
        "asset0"            : "wSUI",
        "asset1"            : "wSTARS",
        "amount0"           : 1_000_000,
        "amount1"           : 19149,
        "min0"              : 1,
        "min1"              : 1,
        "label"             : "Add Liquidity wSUI-wSTARS",
    },
    {
        "enabled"           : True,
        "asset0"            : "wSUI",
        "asset1"            : "wDUBHE",
        "amount0"           : 1_000_000,
        "amount1"           : 5765,
        "min0"              : 1,
        "min1"              : 1,
        "label"             : "Add Liquidity wSUI-wDUBHE",
    },
    {
        "enabled"           : True,
        "asset0"            : "wDUBHE",
        "asset1"            : "wSTARS",
        "amount0"           : 2000,
        "amount1"           : 13873,
        "min0"              : 1,
        "min1"              : 1,
        "label"             : "Add Liquidity wDUBHE-wSTARS",
    },
]
