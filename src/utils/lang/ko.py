"""Korean UI strings."""

STRINGS: dict[str, str] = {
    # Tabs
    "Subtitle": "자막 생성",
    "Position Presets": "포지션 프리셋",

    # Subtitle tab
    "Text": "텍스트",
    "Enter subtitle text...": "자막 텍스트 입력...",
    "Style": "스타일 설정",
    "Font:": "폰트:",
    "Font size:": "폰트 크기:",
    "Weight:": "굵기:",
    "Regular": "Regular",
    "Medium": "Medium",
    "SemiBold": "SemiBold",
    "Bold": "Bold",
    "ExtraBold": "ExtraBold",
    "Letter spacing:": "자간:",
    "Text color:": "텍스트 색상:",
    "Background color:": "배경 색상:",
    "Background opacity:": "배경 투명도:",
    "Padding (vertical):": "패딩 (상하):",
    "Padding (horizontal):": "패딩 (좌우):",
    "Corner radius:": "모서리:",
    "Text offset Y:": "텍스트 세로 보정:",
    "Select Color": "색상 선택",
    "Output": "출력 설정",
    "Save folder:": "저장 경로:",
    "Choose folder...": "폴더 선택...",
    "Browse...": "찾아보기...",
    "Select output folder": "저장 폴더 선택",
    "File prefix:": "파일명 접두사:",
    "Next number:": "다음 번호:",
    "Insert into active sequence": "활성 시퀀스에 삽입",
    "Preview": "미리보기",
    "Generate": "생성",

    # Generation status
    "Enter subtitle text": "텍스트를 입력하세요",
    "Choose an output folder": "저장 경로를 선택하세요",
    "Generating...": "생성 중...",
    "Created: {name}": "생성 완료: {name}",
    "Error: could not write {name}": "오류: {name} 저장 실패",
    "Error: import failed for {name}": "오류: {name} 가져오기 실패",

    # Position tab
    "Save": "저장",
    "Inspect clip": "클립 정보",
    "Clip info": "클립 정보",
    "Empty": "비어 있음",
    "Click a preset to store the selected clip's position":
        "프리셋 버튼을 클릭하면 현재 클립 위치가 저장됩니다",
    "Click a preset to move the selected clip there":
        "프리셋 버튼을 클릭하면 선택된 클립에 위치가 적용됩니다",
    "Saved to preset {n}": "프리셋 {n}에 저장됨",
    "Select a clip first": "클립을 선택하세요",
    "Failed to read clip position": "위치 가져오기 실패",
    "Preset {n} applied": "프리셋 {n} 적용됨",
    "No preset stored": "저장된 프리셋 없음",
    "Failed to apply position": "위치 적용 실패",
    "No clip selected": "선택된 클립 없음",
}
