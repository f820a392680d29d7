# ctbigint

Fixed-width unsigned big integers built from 64-bit limbs, with wrapping,
saturating and checked arithmetic, shifts, byte and hex encodings, modular
helpers and residues kept in Montgomery form. No dependencies beyond the
standard library.

## Installation

```
pip install ctbigint
```

## Fixed-width integers

`ctbigint.uint.uint_type(limbs)` (the same as `Uint.sized(limbs)`) returns the
integer class for a given number of 64-bit limbs. Each class has `LIMBS`,
`BITS`, `BYTES` and the constants `ZERO`, `ONE` and `MAX`. Values are
immutable, hashable, compare with `==` and `<` against values of the same
width, and convert with `int()`.

```python
from ctbigint.uint import uint_type

U128 = uint_type(2)
U64 = uint_type(1)

n = U128.from_be_hex("00112233445566778899aabbccddeeff")
hi, lo = n.split()
assert hi == U64.from_u64(0x0011223344556677)
assert n.resize(U64) == lo

lo, hi = U64.from_u64(0xFFFF_FFFF_FFFF_FFFF).mul_wide(U64.from_u64(2))
assert U64.ZERO.wrapping_sub(U64.ONE) == U64.MAX
assert (U128.ONE << 127) >> 127 == U128.ONE
assert U128.from_u8(144).sqrt() == U128.from_u8(12)
```

Construction: `from_u8`, `from_u16`, `from_u32`, `from_u64`, `from_u128`,
`from_word`, `from_wide_word` and `from_words` (little-endian 64-bit words);
`as_words` gives the words back. Out-of-range inputs raise `ValueError`, and
a width too narrow for the input type raises `ValueError` as well.

Encodings: `from_be_slice`, `from_le_slice`, `from_be_hex`, `from_le_hex`,
`to_be_bytes`, `to_le_bytes`. Inputs must be exactly the width of the type.
Formatting with `x` and `X` gives zero-padded hex of the full width.

Arithmetic: `mul_wide` and `square_wide` return `(lo, hi)`; `square` returns
a single value of twice the width; `wrapping_mul`, `saturating_mul`,
`wrapping_sub`, `saturating_sub`, and `sbb` (subtract with borrow word).
`checked_mul`, `checked_sub` and `checked_sqrt` return `None` when the result
does not fit or is not exact. Shifts: `shl_vartime`, `shr_vartime`, the `<<`
and `>>` operators, and the class methods `shl_vartime_wide` and
`shr_vartime_wide` on `(lo, hi)` pairs.

Random values: `Uint.random(rng)` and `Uint.random_mod(rng, modulus)` accept
any object with `getrandbits` (such as `random.Random`), or `None` to use the
system's secure source. `random_mod` uses rejection sampling.

## Modular arithmetic

```python
from ctbigint.uint import uint_type

U64 = uint_type(1)
inverse, exists = U64.from_u64(3).inv_odd_mod(U64.from_u64(13))
assert exists and inverse == U64.from_u64(9)
```

Also available: `neg_mod`, `sub_mod`, `inv_mod2k`, `inv_odd_mod_bounded`, and
`sub_mod_special`, `neg_mod_special`, `mul_mod_special` for moduli of the form
`2**BITS - c` with `c` a single word.

`ctbigint.montgomery` holds the underlying functions on Montgomery-form
values: `montgomery_reduction`, `add_montgomery_form`, `sub_montgomery_form`,
`mul_montgomery_form`, `square_montgomery_form`, `div_by_2`,
`inv_montgomery_form` and `pow_montgomery_form` (fixed 4-bit window).

## Residues with a modulus chosen at runtime

```python
from ctbigint.uint import uint_type
from ctbigint.dyn_residue import DynResidue, DynResidueParams

U256 = uint_type(4)
params = DynResidueParams(
    U256.from_be_hex("ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551")
)
x = DynResidue(U256.from_u64(5), params)
y = DynResidue(U256.from_u64(7), params)
assert (x * y).retrieve() == U256.from_u64(35)
assert x.pow(U256.from_u64(2)).retrieve() == U256.from_u64(25)
```

The modulus must be odd. `DynResidue.zero(params)` and `DynResidue.one(params)`
build the constants; `params()` returns the parameters. Mixing residues with
different parameters raises `ValueError`.

## Residues with a fixed modulus

`impl_modulus(name, uint_type, value)` builds a `ResidueParams` with the
Montgomery constants computed once; `const_residue(value, modulus)` (or
`Residue(value, modulus)`) makes a `Residue` for it.

```python
from ctbigint.uint import uint_type
from ctbigint.residue import impl_modulus, const_residue

U64 = uint_type(1)
TestMod = impl_modulus("TestMod", U64, "30e4b8f030ab42f3")
two = const_residue(U64.from_u64(2), TestMod)
assert (two + two).retrieve() == U64.from_u64(4)
```

Both residue types support `+`, `-`, `*`, unary `-` and the methods `add`,
`sub`, `mul`, `neg`, `square`, `pow`, `pow_bounded_exp`, `div_by_2` and
`retrieve`. `invert` returns the inverse, or `None` if there is none.

## Wrapping values

`ctbigint.wrapping.Wrapping` holds a fixed-width integer in its `value` field
and makes `+`, `-`, `*` and unary `-` wrap at its width. Formatting and `str`
are passed through to the held value.

## What is not included

- No division or remainder operations on the integer types, and no addition
  method on them; addition is available through `Wrapping` and the residue
  types.
- No bitwise `&`, `|` or `^` operators.
- No DER, RLP or other serialization formats beyond raw bytes and hex.
- Arithmetic runs on Python integers, so no operation is constant-time.

## Running the tests

```
pip install ctbigint[test]
pytest
```