"""Support for working with Unicode scripts."""

from __future__ import annotations

from dataclasses import dataclass

_EMPTY_TAG = b"\0\0\0\0"


@dataclass(frozen=True, order=True, init=False)
class Script:
    """Four byte tag representing a Unicode script.

    A script may be built from four bytes or from a string. A string that
    does not encode to exactly four bytes gives the all-zero tag.
    """

    tag: bytes

    def __init__(self, tag: bytes | bytearray | str) -> None:
        if isinstance(tag, str):
            raw = tag.encode("utf-8")
            if len(raw) != 4:
                raw = _EMPTY_TAG
        else:
            raw = bytes(tag)
            if len(raw) != 4:
                raise ValueError(f"script tag must be four bytes, got {len(raw)}")
        object.__setattr__(self, "tag", raw)

    @classmethod
    def all_samples(cls) -> tuple[tuple[Script, str], ...]:
        """Return every script paired with its sample text, sorted by tag."""
        return _SCRIPT_SAMPLES

    def sample(self) -> str | None:
        """Return sample characters for this script, if known."""
        return _SAMPLE_BY_SCRIPT.get(self)

    def __str__(self) -> str:
        try:
            return self.tag.decode("utf-8")
        except UnicodeDecodeError:
            return ""

    def __repr__(self) -> str:
        return f"Script({str(self)!r})"


_SCRIPT_SAMPLES: tuple[tuple[Script, str], ...] = tuple(
    (Script(tag), text)
    for tag, text in (
        ("Adlm", "𞤀𞤁𞤂𞤃𞤄𞤅𞤆𞤇𞤈𞤉𞤊𞤋𞤌𞤍𞤎𞤏"),
        ("Aghb", "𐔰𐔱𐔲𐔳𐔴𐔵𐔶𐔷𐔸𐔹𐔺𐔻𐔼𐔽𐔾𐔿"),
        ("Ahom", "𑜀𑜁𑜂𑜃𑜄𑜅𑜆𑜇𑜈𑜉𑜊𑜋𑜌𑜍𑜎𑜏"),
        ("Arab", "\u0600\u0601\u0602\u0603\u0604؆؇؈؉؊؋؍؎؏\u0610\u0611"),
        ("Armi", "𐡀𐡁𐡂𐡃𐡄𐡅𐡆𐡇𐡈𐡉𐡊𐡋𐡌𐡍𐡎𐡏"),
        ("Armn", "ԱԲԳԴԵԶԷԸԹԺԻԼԽԾԿՀ"),
        ("Avst", "𐬀𐬁𐬂𐬃𐬄𐬅𐬆𐬇𐬈𐬉𐬊𐬋𐬌𐬍𐬎𐬏"),
        ("Bali", "\u1b00\u1b01\u1b02\u1b03ᬄᬅᬆᬇᬈᬉᬊᬋᬌᬍᬎᬏ"),
        ("Bamu", "ꚠꚡꚢꚣꚤꚥꚦꚧꚨꚩꚪꚫꚬꚭꚮꚯ"),
        ("Bass", "𖫐𖫑𖫒𖫓𖫔𖫕𖫖𖫗𖫘𖫙𖫚𖫛𖫜𖫝𖫞𖫟"),
        ("Batk", "ᯀᯁᯂᯃᯄᯅᯆᯇᯈᯉᯊᯋᯌᯍᯎᯏ"),
        ("Beng", "ঀ\u0981ংঃঅআইঈউঊঋঌএঐওঔ"),
        ("Bhks", "𑰀𑰁𑰂𑰃𑰄𑰅𑰆𑰇𑰈𑰊𑰋𑰌𑰍𑰎𑰏𑰐"),
        ("Bopo", "˪˫ㄅㄆㄇㄈㄉㄊㄋㄌㄍㄎㄏㄐㄑㄒ"),
        ("Brah", "𑀀\U00011001𑀂𑀃𑀄𑀅𑀆𑀇𑀈𑀉𑀊𑀋𑀌𑀍𑀎𑀏"),
        ("Brai", "⠀⠁⠂⠃⠄⠅⠆⠇⠈⠉⠊⠋⠌⠍⠎⠏"),
        ("Bugi", "ᨀᨁᨂᨃᨄᨅᨆᨇᨈᨉᨊᨋᨌᨍᨎᨏ"),
        ("Buhd", "ᝀᝁᝂᝃᝄᝅᝆᝇᝈᝉᝊᝋᝌᝍᝎᝏ"),
        ("Cakm", "\U00011100\U00011101\U00011102𑄃𑄄𑄅𑄆𑄇𑄈𑄉𑄊𑄋𑄌𑄍𑄎𑄏"),
        ("Cans", "᐀ᐁᐂᐃᐄᐅᐆᐇᐈᐉᐊᐋᐌᐍᐎᐏ"),
        ("Cari", "𐊠𐊡𐊢𐊣𐊤𐊥𐊦𐊧𐊨𐊩𐊪𐊫𐊬𐊭𐊮𐊯"),
        ("Cham", "ꨀꨁꨂꨃꨄꨅꨆꨇꨈꨉꨊꨋꨌꨍꨎꨏ"),
        ("Cher", "ᎠᎡᎢᎣᎤᎥᎦᎧᎨᎩᎪᎫᎬᎭᎮᎯ"),
        ("Chrs", "𐾰𐾱𐾲𐾳𐾴𐾵𐾶𐾷𐾸𐾹𐾺𐾻𐾼𐾽𐾾𐾿"),
        ("Copt", "ϢϣϤϥϦϧϨϩϪϫϬϭϮϯⲀⲁ"),
        ("Cpmn", "𒾐𒾑𒾒𒾓𒾔𒾕𒾖𒾗𒾘𒾙𒾚𒾛𒾜𒾝𒾞𒾟"),
        ("Cprt", "𐠀𐠁𐠂𐠃𐠄𐠅𐠈𐠊𐠋𐠌𐠍𐠎𐠏𐠐𐠑𐠒"),
        ("Cyrl", "ЀЁЂЃЄЅІЇЈЉЊЋЌЍЎЏ"),
        ("Deva", "\u0900\u0901\u0902ःऄअआइईउऊऋऌऍऎए"),
        ("Diak", "𑤀𑤁𑤂𑤃𑤄𑤅𑤆𑤉𑤌𑤍𑤎𑤏𑤐𑤑𑤒𑤓"),
        ("Dogr", "𑠀𑠁𑠂𑠃𑠄𑠅𑠆𑠇𑠈𑠉𑠊𑠋𑠌𑠍𑠎𑠏"),
        ("Dsrt", "𐐀𐐁𐐂𐐃𐐄𐐅𐐆𐐇𐐈𐐉𐐊𐐋𐐌𐐍𐐎𐐏"),
        ("Dupl", "𛰀𛰁𛰂𛰃𛰄𛰅𛰆𛰇𛰈𛰉𛰊𛰋𛰌𛰍𛰎𛰏"),
        ("Egyp", "𓀀𓀁𓀂𓀃𓀄𓀅𓀆𓀇𓀈𓀉𓀊𓀋𓀌𓀍𓀎𓀏"),
        ("Elba", "𐔀𐔁𐔂𐔃𐔄𐔅𐔆𐔇𐔈𐔉𐔊𐔋𐔌𐔍𐔎𐔏"),
        ("Elym", "𐿠𐿡𐿢𐿣𐿤𐿥𐿦𐿧𐿨𐿩𐿪𐿫𐿬𐿭𐿮𐿯"),
        ("Ethi", "ሀሁሂሃሄህሆሇለሉሊላሌልሎሏ"),
        ("Geor", "ႠႡႢႣႤႥႦႧႨႩႪႫႬႭႮႯ"),
        ("Glag", "ⰀⰁⰂⰃⰄⰅⰆⰇⰈⰉⰊⰋⰌⰍⰎⰏ"),
        ("Gong", "𑵠𑵡𑵢𑵣𑵤𑵥𑵧𑵨𑵪𑵫𑵬𑵭𑵮𑵯𑵰𑵱"),
        ("Gonm", "𑴀𑴁𑴂𑴃𑴄𑴅𑴆𑴈𑴉𑴋𑴌𑴍𑴎𑴏𑴐𑴑"),
        ("Goth", "𐌰𐌱𐌲𐌳𐌴𐌵𐌶𐌷𐌸𐌹𐌺𐌻𐌼𐌽𐌾𐌿"),
        ("Gran", "\U00011300\U00011301𑌂𑌃𑌅𑌆𑌇𑌈𑌉𑌊𑌋𑌌𑌏𑌐𑌓𑌔"),
        ("Grek", "ͰͱͲͳ͵ͶͷͺͻͼͽͿ΄ΆΈΉ"),
        ("Gujr", "\u0a81\u0a82ઃઅઆઇઈઉઊઋઌઍએઐઑઓ"),
        ("Guru", "\u0a01\u0a02ਃਅਆਇਈਉਊਏਐਓਔਕਖਗ"),
        ("Hang", "가"),
        ("Hani", "今"),
        ("Hano", "ᜠᜡᜢᜣᜤᜥᜦᜧᜨᜩᜪᜫᜬᜭᜮᜯ"),
        ("Hatr", "𐣠𐣡𐣢𐣣𐣤𐣥𐣦𐣧𐣨𐣩𐣪𐣫𐣬𐣭𐣮𐣯"),
        (
            "Hebr",
            "\u0591\u0592\u0593\u0594\u0595\u0596\u0597\u0598"
            "\u0599\u059a\u059b\u059c\u059d\u059e\u059f\u05a0",
        ),
        ("Hira", "ぁあぃいぅうぇえぉおかがきぎくぐ"),
        ("Hluw", "𔐀𔐁𔐂𔐃𔐄𔐅𔐆𔐇𔐈𔐉𔐊𔐋𔐌𔐍𔐎𔐏"),
        ("Hmng", "𖬀𖬁𖬂𖬃𖬄𖬅𖬆𖬇𖬈𖬉𖬊𖬋𖬌𖬍𖬎𖬏"),
        ("Hmnp", "𞄀𞄁𞄂𞄃𞄄𞄅𞄆𞄇𞄈𞄉𞄊𞄋𞄌𞄍𞄎𞄏"),
        ("Hung", "𐲀𐲁𐲂𐲃𐲄𐲅𐲆𐲇𐲈𐲉𐲊𐲋𐲌𐲍𐲎𐲏"),
        ("Ital", "𐌀𐌁𐌂𐌃𐌄𐌅𐌆𐌇𐌈𐌉𐌊𐌋𐌌𐌍𐌎𐌏"),
        ("Java", "\ua980\ua981\ua982ꦃꦄꦅꦆꦇꦈꦉꦊꦋꦌꦍꦎꦏ"),
        ("Kali", "꤀꤁꤂꤃꤄꤅꤆꤇꤈꤉ꤊꤋꤌꤍꤎꤏ"),
        ("Kana", "ァアィイゥウェエォオカガキギクグ"),
        ("Kawi", "\U00011f00\U00011f01𑼂𑼃𑼄𑼅𑼆𑼇𑼈𑼉𑼊𑼋𑼌𑼍𑼎𑼏"),
        (
            "Khar",
            "𐨀\U00010a01\U00010a02\U00010a03\U00010a05\U00010a06"
            "\U00010a0c\U00010a0d\U00010a0e\U00010a0f𐨐𐨑𐨒𐨓𐨕𐨖",
        ),
        ("Khmr", "កខគឃងចឆជឈញដឋឌឍណត"),
        ("Khoj", "𑈀𑈁𑈂𑈃𑈄𑈅𑈆𑈇𑈈𑈉𑈊𑈋𑈌𑈍𑈎𑈏"),
        ("Kits", "\U00016fe4𘬀𘬁𘬂𘬃𘬄𘬅𘬆𘬇𘬈𘬉𘬊𘬋𘬌𘬍𘬎"),
        ("Knda", "ಀ\u0c81ಂಃ಄ಅಆಇಈಉಊಋಌಎಏಐ"),
        ("Kthi", "\U00011080\U00011081𑂂𑂃𑂄𑂅𑂆𑂇𑂈𑂉𑂊𑂋𑂌𑂍𑂎𑂏"),
        ("Lana", "ᨠᨡᨢᨣᨤᨥᨦᨧᨨᨩᨪᨫᨬᨭᨮᨯ"),
        ("Laoo", "ກຂຄຆງຈຉຊຌຍຎຏຐຑຒຓ"),
        ("Latn", "abcdefgABCDEFG"),
        ("Lepc", "ᰀᰁᰂᰃᰄᰅᰆᰇᰈᰉᰊᰋᰌᰍᰎᰏ"),
        ("Limb", "ᤀᤁᤂᤃᤄᤅᤆᤇᤈᤉᤊᤋᤌᤍᤎᤏ"),
        ("Lina", "𐘀𐘁𐘂𐘃𐘄𐘅𐘆𐘇𐘈𐘉𐘊𐘋𐘌𐘍𐘎𐘏"),
        ("Linb", "𐀀𐀁𐀂𐀃𐀄𐀅𐀆𐀇𐀈𐀉𐀊𐀋𐀍𐀎𐀏𐀐"),
        ("Lisu", "ꓐꓑꓒꓓꓔꓕꓖꓗꓘꓙꓚꓛꓜꓝꓞꓟ"),
        ("Lyci", "𐊀𐊁𐊂𐊃𐊄𐊅𐊆𐊇𐊈𐊉𐊊𐊋𐊌𐊍𐊎𐊏"),
        ("Lydi", "𐤠𐤡𐤢𐤣𐤤𐤥𐤦𐤧𐤨𐤩𐤪𐤫𐤬𐤭𐤮𐤯"),
        ("Mahj", "𑅐𑅑𑅒𑅓𑅔𑅕𑅖𑅗𑅘𑅙𑅚𑅛𑅜𑅝𑅞𑅟"),
        ("Maka", "𑻠𑻡𑻢𑻣𑻤𑻥𑻦𑻧𑻨𑻩𑻪𑻫𑻬𑻭𑻮𑻯"),
        ("Mand", "ࡀࡁࡂࡃࡄࡅࡆࡇࡈࡉࡊࡋࡌࡍࡎࡏ"),
        ("Mani", "𐫀𐫁𐫂𐫃𐫄𐫅𐫆𐫇𐫈𐫉𐫊𐫋𐫌𐫍𐫎𐫏"),
        ("Marc", "𑱰𑱱𑱲𑱳𑱴𑱵𑱶𑱷𑱸𑱹𑱺𑱻𑱼𑱽𑱾𑱿"),
        ("Medf", "𖹀𖹁𖹂𖹃𖹄𖹅𖹆𖹇𖹈𖹉𖹊𖹋𖹌𖹍𖹎𖹏"),
        ("Mend", "𞠀𞠁𞠂𞠃𞠄𞠅𞠆𞠇𞠈𞠉𞠊𞠋𞠌𞠍𞠎𞠏"),
        ("Merc", "𐦠𐦡𐦢𐦣𐦤𐦥𐦦𐦧𐦨𐦩𐦪𐦫𐦬𐦭𐦮𐦯"),
        ("Mero", "𐦀𐦁𐦂𐦃𐦄𐦅𐦆𐦇𐦈𐦉𐦊𐦋𐦌𐦍𐦎𐦏"),
        ("Mlym", "\u0d00\u0d01ംഃഄഅആഇഈഉഊഋഌഎഏഐ"),
        ("Modi", "𑘀𑘁𑘂𑘃𑘄𑘅𑘆𑘇𑘈𑘉𑘊𑘋𑘌𑘍𑘎𑘏"),
        ("Mong", "᠀᠁᠄᠆᠇᠈᠉᠊\u180b\u180c\u180d\u180e\u180f᠐᠑᠒"),
        ("Mroo", "𖩀𖩁𖩂𖩃𖩄𖩅𖩆𖩇𖩈𖩉𖩊𖩋𖩌𖩍𖩎𖩏"),
        ("Mtei", "ꫠꫡꫢꫣꫤꫥꫦꫧꫨꫩꫪꫫ\uaaec\uaaedꫮꫯ"),
        ("Mult", "𑊀𑊁𑊂𑊃𑊄𑊅𑊆𑊈𑊊𑊋𑊌𑊍𑊏𑊐𑊑𑊒"),
        ("Mymr", "ကခဂဃငစဆဇဈဉညဋဌဍဎဏ"),
        ("Nagm", "𞓐𞓑𞓒𞓓𞓔𞓕𞓖𞓗𞓘𞓙𞓚𞓛𞓜𞓝𞓞𞓟"),
        ("Nand", "𑦠𑦡𑦢𑦣𑦤𑦥𑦦𑦧𑦪𑦫𑦬𑦭𑦮𑦯𑦰𑦱"),
        ("Narb", "𐪀𐪁𐪂𐪃𐪄𐪅𐪆𐪇𐪈𐪉𐪊𐪋𐪌𐪍𐪎𐪏"),
        ("Nbat", "𐢀𐢁𐢂𐢃𐢄𐢅𐢆𐢇𐢈𐢉𐢊𐢋𐢌𐢍𐢎𐢏"),
        ("Newa", "𑐀𑐁𑐂𑐃𑐄𑐅𑐆𑐇𑐈𑐉𑐊𑐋𑐌𑐍𑐎𑐏"),
        ("Nkoo", "߀߁߂߃߄߅߆߇߈߉ߊߋߌߍߎߏ"),
        ("Nshu", "𖿡𛅰𛅱𛅲𛅳𛅴𛅵𛅶𛅷𛅸𛅹𛅺𛅻𛅼𛅽𛅾"),
        ("Ogam", "\u1680ᚁᚂᚃᚄᚅᚆᚇᚈᚉᚊᚋᚌᚍᚎᚏ"),
        ("Olck", "᱐᱑᱒᱓᱔᱕᱖᱗᱘᱙ᱚᱛᱜᱝᱞᱟ"),
        ("Orkh", "𐰀𐰁𐰂𐰃𐰄𐰅𐰆𐰇𐰈𐰉𐰊𐰋𐰌𐰍𐰎𐰏"),
        ("Orya", "\u0b01ଂଃଅଆଇଈଉଊଋଌଏଐଓଔକ"),
        ("Osge", "𐒰𐒱𐒲𐒳𐒴𐒵𐒶𐒷𐒸𐒹𐒺𐒻𐒼𐒽𐒾𐒿"),
        ("Osma", "𐒀𐒁𐒂𐒃𐒄𐒅𐒆𐒇𐒈𐒉𐒊𐒋𐒌𐒍𐒎𐒏"),
        ("Ougr", "𐽰𐽱𐽲𐽳𐽴𐽵𐽶𐽷𐽸𐽹𐽺𐽻𐽼𐽽𐽾𐽿"),
        ("Palm", "𐡠𐡡𐡢𐡣𐡤𐡥𐡦𐡧𐡨𐡩𐡪𐡫𐡬𐡭𐡮𐡯"),
        ("Pauc", "𑫀𑫁𑫂𑫃𑫄𑫅𑫆𑫇𑫈𑫉𑫊𑫋𑫌𑫍𑫎𑫏"),
        ("Perm", "𐍐𐍑𐍒𐍓𐍔𐍕𐍖𐍗𐍘𐍙𐍚𐍛𐍜𐍝𐍞𐍟"),
        ("Phag", "ꡀꡁꡂꡃꡄꡅꡆꡇꡈꡉꡊꡋꡌꡍꡎꡏ"),
        ("Phli", "𐭠𐭡𐭢𐭣𐭤𐭥𐭦𐭧𐭨𐭩𐭪𐭫𐭬𐭭𐭮𐭯"),
        ("Phlp", "𐮀𐮁𐮂𐮃𐮄𐮅𐮆𐮇𐮈𐮉𐮊𐮋𐮌𐮍𐮎𐮏"),
        ("Phnx", "𐤀𐤁𐤂𐤃𐤄𐤅𐤆𐤇𐤈𐤉𐤊𐤋𐤌𐤍𐤎𐤏"),
        ("Plrd", "𖼀𖼁𖼂𖼃𖼄𖼅𖼆𖼇𖼈𖼉𖼊𖼋𖼌𖼍𖼎𖼏"),
        ("Prti", "𐭀𐭁𐭂𐭃𐭄𐭅𐭆𐭇𐭈𐭉𐭊𐭋𐭌𐭍𐭎𐭏"),
        ("Rjng", "ꤰꤱꤲꤳꤴꤵꤶꤷꤸꤹꤺꤻꤼꤽꤾꤿ"),
        ("Rohg", "𐴀𐴁𐴂𐴃𐴄𐴅𐴆𐴇𐴈𐴉𐴊𐴋𐴌𐴍𐴎𐴏"),
        ("Runr", "ᚠᚡᚢᚣᚤᚥᚦᚧᚨᚩᚪᚫᚬᚭᚮᚯ"),
        ("Samr", "ࠀࠁࠂࠃࠄࠅࠆࠇࠈࠉࠊࠋࠌࠍࠎࠏ"),
        ("Sarb", "𐩠𐩡𐩢𐩣𐩤𐩥𐩦𐩧𐩨𐩩𐩪𐩫𐩬𐩭𐩮𐩯"),
        ("Saur", "ꢀꢁꢂꢃꢄꢅꢆꢇꢈꢉꢊꢋꢌꢍꢎꢏ"),
        ("Sgnw", "𝠀𝠁𝠂𝠃𝠄𝠅𝠆𝠇𝠈𝠉𝠊𝠋𝠌𝠍𝠎𝠏"),
        ("Shaw", "𐑐𐑑𐑒𐑓𐑔𐑕𐑖𐑗𐑘𐑙𐑚𐑛𐑜𐑝𐑞𐑟"),
        ("Shrd", "\U00011180\U00011181𑆂𑆃𑆄𑆅𑆆𑆇𑆈𑆉𑆊𑆋𑆌𑆍𑆎𑆏"),
        ("Sidd", "𑖀𑖁𑖂𑖃𑖄𑖅𑖆𑖇𑖈𑖉𑖊𑖋𑖌𑖍𑖎𑖏"),
        ("Sind", "𑊰𑊱𑊲𑊳𑊴𑊵𑊶𑊷𑊸𑊹𑊺𑊻𑊼𑊽𑊾𑊿"),
        ("Sinh", "\u0d81ංඃඅආඇඈඉඊඋඌඍඎඏඐඑ"),
        ("Sogd", "𐼰𐼱𐼲𐼳𐼴𐼵𐼶𐼷𐼸𐼹𐼺𐼻𐼼𐼽𐼾𐼿"),
        ("Sogo", "𐼀𐼁𐼂𐼃𐼄𐼅𐼆𐼇𐼈𐼉𐼊𐼋𐼌𐼍𐼎𐼏"),
        ("Sora", "𑃐𑃑𑃒𑃓𑃔𑃕𑃖𑃗𑃘𑃙𑃚𑃛𑃜𑃝𑃞𑃟"),
        (
            "Soyo",
            "𑩐\U00011a51\U00011a52\U00011a53\U00011a54\U00011a55\U00011a56𑩗𑩘"
            "\U00011a59\U00011a5a\U00011a5b𑩜𑩝𑩞𑩟",
        ),
        ("Sund", "\u1b80\u1b81ᮂᮃᮄᮅᮆᮇᮈᮉᮊᮋᮌᮍᮎᮏ"),
        ("Sylo", "ꠀꠁ\ua802ꠃꠄꠅ\ua806ꠇꠈꠉꠊ\ua80bꠌꠍꠎꠏ"),
        ("Syrc", "܀܁܂܃܄܅܆܇܈܉܊܋܌܍\u070fܐ"),
        ("Tagb", "ᝠᝡᝢᝣᝤᝥᝦᝧᝨᝩᝪᝫᝬᝮᝯᝰ"),
        ("Takr", "𑚀𑚁𑚂𑚃𑚄𑚅𑚆𑚇𑚈𑚉𑚊𑚋𑚌𑚍𑚎𑚏"),
        ("Tale", "ᥐᥑᥒᥓᥔᥕᥖᥗᥘᥙᥚᥛᥜᥝᥞᥟ"),
        ("Talu", "ᦀᦁᦂᦃᦄᦅᦆᦇᦈᦉᦊᦋᦌᦍᦎᦏ"),
        ("Taml", "\u0b82ஃஅஆஇஈஉஊஎஏஐஒஓஔகங"),
        ("Tang", "𖿠𗀀𗀁𗀂𗀃𗀄𗀅𗀆𗀇𗀈𗀉𗀊𗀋𗀌𗀍𗀎"),
        ("Tavt", "ꪀꪁꪂꪃꪄꪅꪆꪇꪈꪉꪊꪋꪌꪍꪎꪏ"),
        ("Telu", "\u0c00ఁంః\u0c04అఆఇఈఉఊఋఌఎఏఐ"),
        ("Tfng", "ⴰⴱⴲⴳⴴⴵⴶⴷⴸⴹⴺⴻⴼⴽⴾⴿ"),
        ("Tglg", "ᜀᜁᜂᜃᜄᜅᜆᜇᜈᜉᜊᜋᜌᜍᜎᜏ"),
        ("Thaa", "ހށނރބޅކއވމފދތލގޏ"),
        ("Thai", "กขฃคฅฆงจฉชซฌญฎฏฐ"),
        ("Tibt", "ༀ༁༂༃༄༅༆༇༈༉༊་༌།༎༏"),
        ("Tirh", "𑒀𑒁𑒂𑒃𑒄𑒅𑒆𑒇𑒈𑒉𑒊𑒋𑒌𑒍𑒎𑒏"),
        ("Tnsa", "𖩰𖩱𖩲𖩳𖩴𖩵𖩶𖩷𖩸𖩹𖩺𖩻𖩼𖩽𖩾𖩿"),
        ("Toto", "𞊐𞊑𞊒𞊓𞊔𞊕𞊖𞊗𞊘𞊙𞊚𞊛𞊜𞊝𞊞𞊟"),
        ("Ugar", "𐎀𐎁𐎂𐎃𐎄𐎅𐎆𐎇𐎈𐎉𐎊𐎋𐎌𐎍𐎎𐎏"),
        ("Vaii", "ꔀꔁꔂꔃꔄꔅꔆꔇꔈꔉꔊꔋꔌꔍꔎꔏ"),
        ("Vith", "𐕰𐕱𐕲𐕳𐕴𐕵𐕶𐕷𐕸𐕹𐕺𐕼𐕽𐕾𐕿𐖀"),
        ("Wara", "𑢠𑢡𑢢𑢣𑢤𑢥𑢦𑢧𑢨𑢩𑢪𑢫𑢬𑢭𑢮𑢯"),
        ("Wcho", "𞋀𞋁𞋂𞋃𞋄𞋅𞋆𞋇𞋈𞋉𞋊𞋋𞋌𞋍𞋎𞋏"),
        ("Xpeo", "𐎠𐎡𐎢𐎣𐎤𐎥𐎦𐎧𐎨𐎩𐎪𐎫𐎬𐎭𐎮𐎯"),
        ("Xsux", "𒀀𒀁𒀂𒀃𒀄𒀅𒀆𒀇𒀈𒀉𒀊𒀋𒀌𒀍𒀎𒀏"),
        ("Yezi", "𐺀𐺁𐺂𐺃𐺄𐺅𐺆𐺇𐺈𐺉𐺊𐺋𐺌𐺍𐺎𐺏"),
        ("Yiii", "ꀀꀁꀂꀃꀄꀅꀆꀇꀈꀉꀊꀋꀌꀍꀎꀏ"),
        (
            "Zanb",
            "𑨀\U00011a01\U00011a02\U00011a03\U00011a04\U00011a05\U00011a06"
            "\U00011a07\U00011a08\U00011a09\U00011a0a𑨋𑨌𑨍𑨎𑨏",
        ),
    )
)

_SAMPLE_BY_SCRIPT: dict[Script, str] = dict(_SCRIPT_SAMPLES)