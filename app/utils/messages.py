"""응답 메시지 카탈로그 — 기능/동작/결과별 사용자 메시지.

Centralized message catalog keyed FEATURE → ACTION → OUTCOME.
Every envelope message and every typed error message is drawn from here
so the client sees one consistent vocabulary.

Usage:
    MESSAGES["POST"]["CREATE"]["SUCCEED"]
"""

MESSAGES: dict[str, dict[str, dict[str, str]]] = {
    "AUTH": {
        "SIGN_UP": {
            "SUCCEED": "회원가입에 성공했습니다.",
            "DUPLICATE": "이미 가입된 이메일입니다.",
        },
        "SIGN_IN": {
            "SUCCEED": "로그인에 성공했습니다.",
            "UNAUTHORIZED": "이메일 또는 비밀번호가 일치하지 않습니다.",
        },
        "REFRESH": {
            "SUCCEED": "토큰이 재발급되었습니다.",
            "UNAUTHORIZED": "유효하지 않은 리프레시 토큰입니다.",
            "EXPIRED": "리프레시 토큰이 만료되었습니다.",
        },
        "SIGN_OUT": {
            "SUCCEED": "로그아웃되었습니다.",
        },
        "TOKEN": {
            "INVALID": "유효하지 않거나 만료된 토큰입니다.",
            "USER_NOT_FOUND": "사용자를 찾을 수 없거나 탈퇴한 계정입니다.",
        },
    },
    "USER": {
        "FIND_ME": {
            "SUCCEED": "내 정보 조회에 성공했습니다.",
        },
        "UPDATE": {
            "SUCCEED": "내 정보 수정에 성공했습니다.",
            "BAD_REQUEST": "수정할 내용을 입력해주세요.",
        },
        "REMOVE": {
            "SUCCEED": "회원 탈퇴가 완료되었습니다.",
        },
    },
    "COMMUNITY": {
        "CREATE": {
            "SUCCEED": "커뮤니티 생성에 성공했습니다.",
            "DUPLICATE": "이미 존재하는 커뮤니티 이름입니다.",
            "UNAUTHORIZED": "커뮤니티 생성 권한이 없습니다.",
        },
        "FIND_ALL": {
            "SUCCEED": "커뮤니티 목록 조회에 성공했습니다.",
        },
        "FIND_MY": {
            "SUCCEED": "가입한 커뮤니티 조회에 성공했습니다.",
        },
        "FIND_ONE": {
            "SUCCEED": "커뮤니티 조회에 성공했습니다.",
            "NOT_FOUND": "커뮤니티가 존재하지 않습니다.",
        },
        "JOIN": {
            "SUCCEED": "커뮤니티 가입에 성공했습니다.",
            "DUPLICATE": "이미 가입한 커뮤니티입니다.",
            "BAD_REQUEST": "커뮤니티에서 사용할 닉네임을 입력해주세요.",
        },
        "UPDATE": {
            "SUCCEED": "커뮤니티 수정에 성공했습니다.",
            "UNAUTHORIZED": "커뮤니티 수정 권한이 없습니다.",
        },
        "REMOVE": {
            "SUCCEED": "커뮤니티 삭제에 성공했습니다.",
            "UNAUTHORIZED": "커뮤니티 삭제 권한이 없습니다.",
        },
        "MEMBER": {
            "UNAUTHORIZED": "커뮤니티에 가입한 사용자만 이용할 수 있습니다.",
        },
    },
    "POST": {
        "CREATE": {
            "SUCCEED": "게시글 생성에 성공했습니다.",
            "UNAUTHORIZED": "커뮤니티에 가입한 사용자만 게시글을 작성할 수 있습니다.",
            "BAD_REQUEST": "게시글 내용을 입력해주세요.",
        },
        "FIND_POSTS": {
            "SUCCEED": "게시글 목록 조회에 성공했습니다.",
            "ARTIST": "아티스트 게시글 목록 조회에 성공했습니다.",
        },
        "FIND_ONE": {
            "SUCCEED": "게시글 조회에 성공했습니다.",
            "NOT_FOUND": "게시글이 존재하지 않습니다.",
        },
        "UPDATE": {
            "SUCCEED": "게시글 수정에 성공했습니다.",
            "NOT_FOUND": "수정할 게시글이 존재하지 않습니다.",
            "UNAUTHORIZED": "게시글 수정 권한이 없습니다.",
            "BAD_REQUEST": "수정할 내용을 입력해주세요.",
        },
        "REMOVE": {
            "SUCCEED": "게시글 삭제에 성공했습니다.",
            "NOT_FOUND": "삭제할 게시글이 존재하지 않습니다.",
            "UNAUTHORIZED": "게시글 삭제 권한이 없습니다.",
        },
    },
    "COMMENT": {
        "CREATE": {
            "SUCCEED": "댓글 작성에 성공했습니다.",
            "UNAUTHORIZED": "커뮤니티에 가입한 사용자만 댓글을 작성할 수 있습니다.",
            "BAD_REQUEST": "댓글 내용을 입력해주세요.",
        },
        "FIND_ALL": {
            "SUCCEED": "댓글 목록 조회에 성공했습니다.",
        },
        "UPDATE": {
            "SUCCEED": "댓글 수정에 성공했습니다.",
            "NOT_FOUND": "댓글이 존재하지 않습니다.",
            "UNAUTHORIZED": "댓글 수정 권한이 없습니다.",
        },
        "REMOVE": {
            "SUCCEED": "댓글 삭제에 성공했습니다.",
            "NOT_FOUND": "댓글이 존재하지 않습니다.",
            "UNAUTHORIZED": "댓글 삭제 권한이 없습니다.",
        },
    },
    "LIKE": {
        "ITEM": {
            "NOT_FOUND": "좋아요 대상이 존재하지 않습니다.",
        },
        "UPDATE_STATUS": {
            "SUCCEED": "좋아요 상태가 변경되었습니다.",
        },
    },
    "NOTICE": {
        "CREATE": {
            "SUCCEED": "공지사항 작성에 성공했습니다.",
            "UNAUTHORIZED": "공지사항 작성 권한이 없습니다.",
        },
        "FIND_ALL": {
            "SUCCEED": "공지사항 목록 조회에 성공했습니다.",
        },
        "FIND_ONE": {
            "SUCCEED": "공지사항 조회에 성공했습니다.",
            "NOT_FOUND": "공지사항이 존재하지 않습니다.",
        },
        "UPDATE": {
            "SUCCEED": "공지사항 수정에 성공했습니다.",
            "UNAUTHORIZED": "공지사항 수정 권한이 없습니다.",
        },
        "REMOVE": {
            "SUCCEED": "공지사항 삭제에 성공했습니다.",
            "UNAUTHORIZED": "공지사항 삭제 권한이 없습니다.",
        },
    },
    "ADMIN": {
        "ROLE": {
            "UNAUTHORIZED": "관리자만 이용할 수 있습니다.",
            "NOT_FOUND": "커뮤니티 사용자가 존재하지 않습니다.",
        },
        "ARTIST": {
            "GRANT": "아티스트 권한을 부여했습니다.",
            "REVOKE": "아티스트 권한을 회수했습니다.",
            "DUPLICATE": "이미 아티스트로 등록된 사용자입니다.",
            "NOT_FOUND": "아티스트로 등록되지 않은 사용자입니다.",
        },
        "MANAGER": {
            "GRANT": "매니저 권한을 부여했습니다.",
            "REVOKE": "매니저 권한을 회수했습니다.",
            "DUPLICATE": "이미 매니저로 등록된 사용자입니다.",
            "NOT_FOUND": "매니저로 등록되지 않은 사용자입니다.",
        },
    },
    "MEMBERSHIP": {
        "PAYMENT": {
            "SUCCEED": "멤버십 결제가 완료되었습니다.",
            "NOT_PAID": "결제가 완료되지 않았습니다.",
            "AMOUNT_MISMATCH": "결제 금액이 멤버십 가격과 일치하지 않습니다.",
            "MERCHANT_MISMATCH": "주문번호가 결제 정보와 일치하지 않습니다.",
            "DUPLICATE": "이미 처리된 결제입니다.",
            "GATEWAY_ERROR": "결제 정보를 확인할 수 없습니다.",
        },
        "FIND_MY": {
            "SUCCEED": "멤버십 조회에 성공했습니다.",
            "NOT_FOUND": "멤버십이 존재하지 않습니다.",
        },
    },
    "PRODUCT": {
        "CREATE": {
            "SUCCEED": "상품 등록에 성공했습니다.",
        },
        "FIND_ONE": {
            "NOT_FOUND": "상품이 존재하지 않습니다.",
        },
        "CATEGORY": {
            "NOT_FOUND": "상품 카테고리가 존재하지 않습니다.",
        },
    },
    "MERCHANDISE": {
        "CREATE": {
            "SUCCEED": "굿즈 등록에 성공했습니다.",
            "UNAUTHORIZED": "굿즈 등록 권한이 없습니다.",
        },
        "FIND_ALL": {
            "SUCCEED": "굿즈 목록 조회에 성공했습니다.",
        },
        "FIND_ONE": {
            "SUCCEED": "굿즈 조회에 성공했습니다.",
            "NOT_FOUND": "굿즈가 존재하지 않습니다.",
        },
        "UPDATE": {
            "SUCCEED": "굿즈 수정에 성공했습니다.",
            "UNAUTHORIZED": "굿즈 수정 권한이 없습니다.",
        },
        "REMOVE": {
            "SUCCEED": "굿즈 삭제에 성공했습니다.",
            "UNAUTHORIZED": "굿즈 삭제 권한이 없습니다.",
        },
    },
    "CART": {
        "FIND": {
            "SUCCEED": "장바구니 조회에 성공했습니다.",
        },
        "ADD": {
            "SUCCEED": "장바구니에 상품을 담았습니다.",
            "BAD_QUANTITY": "수량은 1개 이상이어야 합니다.",
            "BAD_OPTION": "해당 굿즈의 옵션이 아닙니다.",
            "OUT_OF_STOCK": "재고가 부족합니다.",
        },
        "UPDATE": {
            "SUCCEED": "장바구니 수량을 변경했습니다.",
        },
        "REMOVE": {
            "SUCCEED": "장바구니에서 상품을 삭제했습니다.",
        },
        "ITEM": {
            "NOT_FOUND": "장바구니 상품이 존재하지 않습니다.",
        },
        "CHECKOUT": {
            "SUCCEED": "주문이 완료되었습니다.",
            "EMPTY": "장바구니가 비어 있습니다.",
        },
    },
    "MEDIA": {
        "CREATE": {
            "SUCCEED": "미디어 등록에 성공했습니다.",
            "UNAUTHORIZED": "미디어 등록 권한이 없습니다.",
        },
        "FIND_ALL": {
            "SUCCEED": "미디어 목록 조회에 성공했습니다.",
        },
        "FIND_ONE": {
            "SUCCEED": "미디어 조회에 성공했습니다.",
            "NOT_FOUND": "미디어가 존재하지 않습니다.",
        },
        "REMOVE": {
            "SUCCEED": "미디어 삭제에 성공했습니다.",
            "UNAUTHORIZED": "미디어 삭제 권한이 없습니다.",
        },
    },
    "LIVE": {
        "CREATE": {
            "SUCCEED": "라이브가 시작되었습니다.",
            "UNAUTHORIZED": "아티스트만 라이브를 시작할 수 있습니다.",
        },
        "FIND_ALL": {
            "SUCCEED": "라이브 목록 조회에 성공했습니다.",
        },
        "END": {
            "SUCCEED": "라이브가 종료되었습니다.",
            "NOT_FOUND": "라이브가 존재하지 않습니다.",
            "UNAUTHORIZED": "라이브 종료 권한이 없습니다.",
            "ALREADY_ENDED": "이미 종료된 라이브입니다.",
        },
    },
    "STORAGE": {
        "PRESIGN": {
            "SUCCEED": "업로드 URL이 발급되었습니다.",
        },
        "UPLOAD": {
            "SUCCEED": "파일이 업로드되었습니다.",
        },
    },
    "COMMON": {
        "VALIDATION": {
            "BAD_REQUEST": "요청 값이 올바르지 않습니다.",
        },
        "SERVER": {
            "ERROR": "서버 내부 오류가 발생했습니다.",
        },
    },
}
