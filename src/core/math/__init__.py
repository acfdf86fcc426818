"""
Core math modules

Number-theory примитивы поверх встроенного int: тесты простоты,
факторизация, модульная арифметика, позиционное кодирование.
"""

# Errors
from src.core.math.errors import (
    ArgumentError,
    ArithmeticFailure,
    DomainError,
    ErrorKind,
    FormatError,
    NumberTheoryError,
    OperationResult,
    UnsupportedBaseError,
    capture,
)

# Integer Safeguards
from src.core.math.integer_safeguards import (
    DEFAULT_CONFIDENCE,
    PRODUCTION_CONFIDENCE,
    decompose_power_of_two,
    integer_log,
    is_integer,
    require_integer,
    validate_confidence,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Random Source
from src.core.math.random_source import (
    RandomSource,
    default_random_source,
    resolve_random_source,
)

# Primality
from src.core.math.primality import (
    PrimalityConfig,
    PrimalityTester,
    find_jacobi_symbol,
    generate_prime,
    generate_prime_in_range,
    generate_secure_random_below,
    is_probable_prime,
    is_probable_prime_fermat,
    is_probable_prime_miller_rabin,
    is_probable_prime_solovay_strassen,
    miller_rabin_pass,
    miller_rabin_test,
)

# Factorization
from src.core.math.factorization import (
    DEFAULT_RHO_SEED,
    DEFAULT_SIEVE_LIMIT,
    FactorizationConfig,
    Factorizer,
    RhoOutcome,
    RhoResult,
    eratosthenes_primes,
    factor,
    factor_using_pollards_rho,
    pollards_rho,
    trial_division,
    try_factor,
)

# Modular Arithmetic
from src.core.math.modular import (
    chinese_remainder_theorem,
    least_common_multiple,
    mod_inverse,
    mod_inverse_fermat,
    normalize_mod,
    try_chinese_remainder_theorem,
    validate_pairwise_coprime,
)

# Base Codec
from src.core.math.base_codec import (
    ALPHABETS,
    BASE2_ALPHABET,
    BASE8_ALPHABET,
    BASE10_ALPHABET,
    BASE16_ALPHABET,
    BASE32_ALPHABET,
    BASE64_ALPHABET,
    BaseFormat,
    convert_base,
    convert_from_base,
    convert_from_base2,
    convert_from_base8,
    convert_from_base10,
    convert_from_base16,
    convert_from_base32,
    convert_from_base64,
    convert_to_base,
    convert_to_base2,
    convert_to_base8,
    convert_to_base10,
    convert_to_base16,
    convert_to_base32,
    convert_to_base64,
    decode,
    encode,
    is_valid_for_base,
    probable_base,
    resolve_base,
    try_convert_from_base,
)

__all__ = [
    # Errors
    "ArgumentError",
    "ArithmeticFailure",
    "DomainError",
    "ErrorKind",
    "FormatError",
    "NumberTheoryError",
    "OperationResult",
    "UnsupportedBaseError",
    "capture",
    # Integer Safeguards: Constants
    "DEFAULT_CONFIDENCE",
    "PRODUCTION_CONFIDENCE",
    # Integer Safeguards: Functions
    "decompose_power_of_two",
    "integer_log",
    "is_integer",
    "require_integer",
    "validate_confidence",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Random Source
    "RandomSource",
    "default_random_source",
    "resolve_random_source",
    # Primality: Types
    "PrimalityConfig",
    "PrimalityTester",
    # Primality: Functions
    "find_jacobi_symbol",
    "generate_prime",
    "generate_prime_in_range",
    "generate_secure_random_below",
    "is_probable_prime",
    "is_probable_prime_fermat",
    "is_probable_prime_miller_rabin",
    "is_probable_prime_solovay_strassen",
    "miller_rabin_pass",
    "miller_rabin_test",
    # Factorization: Constants
    "DEFAULT_RHO_SEED",
    "DEFAULT_SIEVE_LIMIT",
    # Factorization: Types
    "FactorizationConfig",
    "Factorizer",
    "RhoOutcome",
    "RhoResult",
    # Factorization: Functions
    "eratosthenes_primes",
    "factor",
    "factor_using_pollards_rho",
    "pollards_rho",
    "trial_division",
    "try_factor",
    # Modular Arithmetic
    "chinese_remainder_theorem",
    "least_common_multiple",
    "mod_inverse",
    "mod_inverse_fermat",
    "normalize_mod",
    "try_chinese_remainder_theorem",
    "validate_pairwise_coprime",
    # Base Codec: Constants
    "ALPHABETS",
    "BASE2_ALPHABET",
    "BASE8_ALPHABET",
    "BASE10_ALPHABET",
    "BASE16_ALPHABET",
    "BASE32_ALPHABET",
    "BASE64_ALPHABET",
    # Base Codec: Types
    "BaseFormat",
    # Base Codec: Functions
    "convert_base",
    "convert_from_base",
    "convert_from_base2",
    "convert_from_base8",
    "convert_from_base10",
    "convert_from_base16",
    "convert_from_base32",
    "convert_from_base64",
    "convert_to_base",
    "convert_to_base2",
    "convert_to_base8",
    "convert_to_base10",
    "convert_to_base16",
    "convert_to_base32",
    "convert_to_base64",
    "decode",
    "encode",
    "is_valid_for_base",
    "probable_base",
    "resolve_base",
    "try_convert_from_base",
]
