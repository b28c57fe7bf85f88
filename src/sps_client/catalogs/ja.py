"""Japanese error catalog."""

PAYMENT_METHOD = {
    "101": "クレジットカード決済",
    "201": "コンビニ決済",
    "301": "ペイジー決済",
    "401": "ソフトバンクまとめて支払い",
    "402": "ドコモ払い",
    "405": "auかんたん決済",
    "501": "PayPay決済",
    "999": "共通",
}

_CARRIER_TYPES = {
    "03": "必須チェックエラー",
    "04": "属性チェックエラー",
    "05": "桁数チェックエラー",
    "07": "定義値チェックエラー",
    "09": "該当データなし",
    "20": "キャリア拒否",
    "99": "キャリアシステムエラー",
}

PAYMENT_TYPE_ERROR = {
    "101": {
        "01": "カード会社オーソリエラー",
        "02": "カード会社通信エラー",
        "03": "必須チェックエラー",
        "04": "属性チェックエラー",
        "05": "桁数チェックエラー",
        "06": "フォーマットチェックエラー",
        "07": "定義値チェックエラー",
        "08": "重複リクエスト",
        "09": "該当データなし",
        "10": "カード利用不可",
        "11": "有効期限切れ",
        "12": "限度額オーバー",
        "13": "セキュリティコード不一致",
        "20": "取引状態不正",
        "99": "クレジットカードシステムエラー",
    },
    "201": {
        "03": "必須チェックエラー",
        "04": "属性チェックエラー",
        "05": "桁数チェックエラー",
        "07": "定義値チェックエラー",
        "21": "支払期限切れ",
    },
    "401": _CARRIER_TYPES,
    "402": _CARRIER_TYPES,
    "405": _CARRIER_TYPES,
    "999": {
        "01": "システムエラー",
        "02": "メンテナンス中",
        "03": "認証エラー",
        "04": "ハッシュコード不一致",
        "05": "許可されていないIPアドレス",
        "06": "未対応のリクエストID",
    },
}

PAYMENT_ITEM_ERROR = {
    "001": "マーチャントID",
    "002": "サービスID",
    "003": "顧客ID",
    "004": "購入ID",
    "005": "商品ID",
    "006": "商品名称",
    "007": "税額",
    "008": "金額",
    "009": "継続課金区分",
    "010": "自動課金区分",
    "011": "サービスタイプ",
    "012": "決済区分",
    "013": "最終課金月",
    "014": "キャンペーンタイプ",
    "015": "トラッキングID",
    "016": "顧客利用端末タイプ",
    "017": "リクエスト日時",
    "018": "暗号化フラグ",
    "019": "チェックサム",
    "020": "リクエストID",
    "999": "その他",
    "101": {
        "101": "クレジットカード番号",
        "102": "クレジットカード有効期限",
        "103": "セキュリティコード",
        "104": "カードブランド",
        "105": "トークン",
        "106": "トークンキー",
        "107": "分割回数",
        "108": "処理トラッキングID",
        "109": "処理日時",
    },
    "201": {
        "201": "コンビニコード",
        "202": "氏名",
        "203": "電話番号",
        "204": "支払期限",
    },
    "401": {
        "201": "ソフトバンク契約者ID",
        "202": "課金月",
    },
    "402": {
        "201": "ドコモ契約者ID",
        "202": "課金月",
    },
    "405": {
        "201": "au ID",
        "202": "課金月",
    },
}
