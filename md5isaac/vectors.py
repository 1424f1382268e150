"""Published reference vectors for both engines."""

from __future__ import annotations

# RFC 1321, appendix A.5
MD5_RFC1321 = (
    (b"", "d41d8cd98f00b204e9800998ecf8427e"),
    (b"a", "0cc175b9c0f1b6a831c399e269772661"),
    (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
    (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
    (b"abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
    (
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "d174ab98d277d9f5a5611c2c9f419d9f",
    ),
    (b"1234567890" * 8, "57edf4a22be3c955ac49da2e2107b67a"),
)

# randvect.txt: all-zero seed, the batch generated right after initialisation.
# Words in array order (results[0..255]).
ISAAC_RANDVECT_HEX = (
    "f650e4c8e448e96d98db2fb4f5fad54f433f1afbedec154ad837048746ca4f9a"
    "5de3743e88381097f1d444eb823cedb66a83e1e04a5f6355c744243325890e2e"
    "7452e31957161df638a824f3002ed71329f5544951c08d83d78cb99ea0cc74f3"
    "8f651659cbc8b7c2f5f71c6912ad6419e5792e1b860536b809b3ce98d45d6d81"
    "f3b2612917e38f8529cf72ce349947b0c998f9ffb5e13dae32ae2a2bf7cf814c"
    "8ebfa303cf22e0640b923200eca4d58aef53cec4d0f7b37d9c411a2affdf8a80"
    "b40e27bcb4d2f97644b89b08f37c71d51a70e7e90bdb9c3060dc5207b3c3f24b"
    "d7386806229749b54e232cd091dabc65a70e11018b87437e5781414fcdbc62e2"
    "8107c9ff69d2e4ae3b18e752b143b6886f4e077295138769943c3c74afc17a97"
    "0fd439636a529b0bd8c58a6aa8bcc22d2db35dfea7a2f4026cb167db538e1f4e"
    "7275e2771d3b8e97ecc5dc9115e3a5b90369661430ab93ecac9fe69d7bc76811"
    "60eda8da28833522d5295ebc5adb60e7f7e1cdd097166d14b67ec13a210f3925"
    "64af0fef0d0286843aea3decb058bafbb8b0ccfcf2b5cc05e3a662d9814bc24c"
    "2364a1aa37c0ed052b36505c451e7ec85d2a542fe43d0fbb91c8d92560d4d5f8"
    "12a0594b9e8a51dacd49ebdb1b0dcdc1cd57c7f7e63444517ded386f2f36fa86"
    "a6d1210133bc405db388d96cdb6dbe96fe29661c13edc0cbcb0eee4a70cc94ae"
    "de11ed340606cf9f3a6ce38923d74f4ea37f63ff917bdec2d73f72d40e7e0e67"
    "3d77d9a213add9228891b3db01a9bd7056a001e3d51f093dcc033ce35ad0d3b0"
    "34105a8c6a123f57bd2e50247364944be89b1a3b21835c4d9f39e2d9d405ded8"
    "294d37e5bccaaeed35a124b56708a2bcb00960ba2a98121a4d8fae820bb3263f"
    "12595a196a1075890809e49421c171ec884d682514c8009bb0b84e7b03fb88f4"
    "28e7cb789388b13bdd2dc1d5848f520a07c28cd168a3935872c9137d127dd430"
    "c613f1578c2f0d55f7d3f39f309bfb788406b13746c0a6f53718d59708607f04"
    "76904b6d04db4e13cd7411a7b510ce0ebfc7f7ccb83f957afdfef62dc35e4580"
    "3ff1e5244112d96c02c9b944d5990dfbe7e265810d9c7e7e826dfa8966f1e0ab"
    "30bcc764eadebeaced35e5ee0c571a7de4f3a26af7f58f7badf6bc235d023e65"
    "1ed3ff4eec46b0b6d2a93b51e75b41c97e315aeb61119a5a53245b7933f6d7b1"
    "cae8deba50fc8194afa92a6dc87c80064188bfcd8bace62e78ffa5685597ec0f"
    "b4415f7d08294766ad56764309c36f903dde9f394a0a283c18080c8e080c79ec"
    "79ae4c10cb9e15637cdd662f62d31911a4ca0cf15cf824cd3b708f991e16614c"
    "b6b9d7665de87abb7229ea81d5b2d75056e6cd21fe1e42d596da2655c2b9aa36"
    "b8f6fd4a6a158d1001913fd3af7d1fb80b5e435f90c107576554abda7a68710f"
)

# randseed.txt: key b"This is <i>not</i> the right mytext.", first 256 values
# in extraction order, each printed as 8 hex digits.
ISAAC_RANDSEED_KEY = b"This is <i>not</i> the right mytext."
ISAAC_RANDSEED_HEX = (
    "c9d3bc51 5bc24339 23e22e3a 5659b89a 21c6dcfd 168e10a4 1df755f6 99d3a910"
    "f48f0656 e9431f57 839c384b 238bac78 d3693e2a 96e06a6f 1358bb9e 6872ff7f"
    "75f9a391 9d951a6f 4460a8a1 2818c604 459b44fc e4eeacbf b13edb9c 38f9a0c4"
    "9b6c882d 44ddb798 6a02781b 464d8241 b6e89c5b ee627b94 4b5cf183 030800c9"
    "63e24cba 9582bdaa 8b038c2c 5bcc29d7 ab4e8369 7874b242 1302a96d ec44d5cc"
    "6cc59d03 9abc6857 ea100737 c567708f b25912b4 53899438 b33ba5c0 08d848bc"
    "e32573ca 1190acf5 d015c2e7 be2f137f 2f059bb6 82ca6f0a 39172da5 9bcb3a5b"
    "8288cd54 2f7a6e72 371ac597 3c9c00e1 584ae462 7420bf5e b3e7eeb3 cb1f301d"
    "89f7548d 5c758f6e 5e5689f4 fda0ec6b d080797e c8ce8e0e 08ed5b1a 75f4dca7"
    "c03c8d08 ad11d474 cb4ee33a 6588dd1e e71dd73d 25b36d83 c2a014ee 1f1be022"
    "97748d52 ba47b4b2 b5b0f69f 9092902e 8cc370f9 a65b687f bb8ad147 3c532186"
    "25ff761b f507c27c afb18108 3b8e7ade 3044df96 f5b51be4 b8b3895f 56ad9f82"
    "13cf0045 adbbcd41 ba984c48 ac14915f 4dea8a1c 70240f6e 46e5085b 44995e68"
    "d49a2785 bec21184 33bd3209 28b6c25f 8aaa592c 642844eb b2a8bf4f b62c21b4"
    "1ed94071 5047c204 9966bf98 54d6a1de d3b08718 602cdd1e 27d3b289 f5284ba7"
    "e552480e b4317128 a6a831c7 ef98ba77 082e2387 a60f8187 1bdda376 d11b59d2"
    "0b2adb58 5f07968d 63565555 6eaaa2da 43de6b6d 86d498ff e3492290 87aa3a05"
    "4ea8d3b5 bb9fe9a1 798b2222 3e77c27e d263434e 82d504cb 5936c07b 82b93bcb"
    "40e1ddc4 fed24c09 5e66d6e5 b3f09f1d 812b901c 99b87e3b 7ac6b7ed 30d63060"
    "7508dc03 a42248a9 ad313fdf 3a4e945c ac875460 0940e817 9f71db1f ed35bebe"
    "29c77c31 79e42f94 a3dbcd79 40651421 d9af6853 66b9ecc1 9d93f3c4 a38e3003"
    "181e1ab7 c952f8ef dfaebb9e 91a50215 95590c72 d2d2db40 7a479242 9ae6f3dc"
    "6d6ee596 f0ccabd5 50367e9e af96bafa c4940ecd 63a82778 e40950a9 fabf9e2c"
    "f91450e9 1ad83713 795209f6 9f7d8ca0 c4cd930c 2ac7c086 a24e2dab 8b7a3616"
    "b691e3ec f30e7631 3f09c258 4ea46c5a d799e7d8 75d3fa5d 17966f6c b9f30b32"
    "da1e3c67 ab3dc36a d3a47ef3 48301362 0df21a5c 38731862 a8b52636 f4b7ab4f"
    "b709addd 0642b616 645c68bb 7defde20 c7eb832e c5d9d39e c52256e5 992300b4"
    "c581df99 a642f4aa d4f0ba87 94b9d830 92c4ced6 a74b776e 87d32645 dab3bd5f"
    "99f8eec0 e0457735 b44c5c92 95688a53 3856aae8 3352431d 77449906 011d7f76"
    "936df33e 5de7c346 2f6039f8 05795322 d6b64887 9f812dab 416c484d c63687a5"
    "b0658c71 772bfea5 3ed63727 cc03377f 2d658374 40597e84 ef62dfaa 3ba989b7"
    "d1b26dc5 d3a7f5e1 e5de149f 9c26e15a 63477791 3c7a0855 f00990dd cb673179"
)


def isaac_randvect_words() -> list[int]:
    s = "".join(ISAAC_RANDVECT_HEX)
    return [int(s[i : i + 8], 16) for i in range(0, len(s), 8)]


def isaac_randseed_words() -> list[int]:
    s = "".join(ISAAC_RANDSEED_HEX).replace(" ", "")
    return [int(s[i : i + 8], 16) for i in range(0, len(s), 8)]
